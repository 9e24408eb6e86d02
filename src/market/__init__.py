"""Market — котировки займа по предложению кредитора.

Рынок содержит одно предложение; QuoteEvaluator выдаёт котировку
только при точном совпадении суммы.
"""

from .quote_evaluator import QuoteEvaluator, QuoteEvaluatorConfig

__all__ = [
    "QuoteEvaluator",
    "QuoteEvaluatorConfig",
]
