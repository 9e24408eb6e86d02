"""Quote Evaluator — котировка займа по предложению одного кредитора

Рынок содержит ровно одно предложение (Offer). Для запрошенной суммы
evaluator решает, может ли кредитор полностью выдать заём, и если да,
вычисляет ежемесячный платёж, полную сумму выплат и отображаемую ставку.

Правила:
- Котировка выдаётся только при available_amount == requested_amount
  (точное совпадение, без частичного финансирования)
- Платёж по формуле аннуитета P = L·i / (1 - (1+i)^-n), n = 36 месяцев
- total_repayment = n · P из неокруглённого P
- Округление "half away from zero": ставка до 1 знака, суммы до 2 знаков
- annual_rate == 0 → AmortizationDomainViolation
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.core.domain.offer import Offer
from src.core.domain.quote import QuoteResult
from src.core.math.amortization import (
    PAYMENT_PERIOD_MONTHS_DEFAULT,
    monthly_repayment,
)
from src.core.math.numerical_safeguards import (
    round_half_away_from_zero,
    validate_positive,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class QuoteEvaluatorConfig:
    """Конфигурация Quote Evaluator.

    Срок займа и параметры отображения котировки.
    """

    payment_period: int = PAYMENT_PERIOD_MONTHS_DEFAULT  # месяцев
    currency_symbol: str = "£"
    rate_decimals: int = 1  # знаков после запятой для ставки в %
    money_decimals: int = 2  # знаков после запятой для сумм

    def __post_init__(self):
        if isinstance(self.payment_period, bool) or not isinstance(self.payment_period, int):
            raise TypeError(
                f"payment_period must be int, got {type(self.payment_period).__name__}"
            )
        if self.payment_period <= 0:
            raise ValueError(f"payment_period must be positive, got {self.payment_period}")
        # Контракт quote_result требует дробную часть в ставке и суммах
        if self.rate_decimals < 1 or self.money_decimals < 1:
            raise ValueError(
                f"rate_decimals and money_decimals must be >= 1, "
                f"got {self.rate_decimals} and {self.money_decimals}"
            )


# =============================================================================
# QUOTE EVALUATOR
# =============================================================================


class QuoteEvaluator:
    """Котировка займа по единственному предложению рынка.

    Evaluator не хранит изменяемого состояния: evaluate() является чистой функцией
    от (offer, requested_amount), повторный вызов даёт равный результат.
    """

    def __init__(self, offer: Offer, config: QuoteEvaluatorConfig | None = None):
        """Инициализация evaluator.

        Args:
            offer: предложение кредитора
            config: конфигурация (опционально, используется default)
        """
        self.offer = offer
        self.config = config or QuoteEvaluatorConfig()

    @classmethod
    def from_market_row(
        cls,
        row: Dict[str, Any],
        config: QuoteEvaluatorConfig | None = None,
    ) -> "QuoteEvaluator":
        """Evaluator из сырой строки рынка {"Lender", "Rate", "Available"}."""
        return cls(Offer.from_market_row(row), config)

    @property
    def payment_period(self) -> int:
        return self.config.payment_period

    def monthly_payment(self) -> float:
        """Неокруглённый ежемесячный платёж по предложению.

        Raises:
            AmortizationDomainViolation: если annual_rate == 0
        """
        return monthly_repayment(
            self.offer.available_amount,
            self.offer.annual_rate,
            self.payment_period,
        )

    def total_payment(self) -> float:
        """Неокруглённая полная сумма выплат за payment_period месяцев."""
        return self.payment_period * self.monthly_payment()

    def evaluate(self, requested_amount: float) -> Optional[QuoteResult]:
        """Котировка для запрошенной суммы.

        Args:
            requested_amount: запрошенная сумма займа (> 0)

        Returns:
            QuoteResult если кредитор может выдать ровно requested_amount,
            иначе None

        Raises:
            ValueError: если requested_amount <= 0 или NaN/Inf
            AmortizationDomainViolation: если суммы совпали, но annual_rate == 0
        """
        validate_positive(requested_amount, "requested_amount")

        if not self.offer.can_fund(requested_amount):
            logger.debug(
                "No quote: lender %r offers %s, requested %s",
                self.offer.lender,
                self.offer.available_amount,
                requested_amount,
            )
            return None

        monthly = self.monthly_payment()
        total = self.payment_period * monthly

        rate_pct = round_half_away_from_zero(
            self.offer.annual_rate * 100, self.config.rate_decimals
        )

        quote = QuoteResult(
            rate_display=f"{rate_pct:.{self.config.rate_decimals}f}%",
            requested_amount_display=f"{self.config.currency_symbol}{requested_amount}",
            monthly_repayment=round_half_away_from_zero(monthly, self.config.money_decimals),
            total_repayment=round_half_away_from_zero(total, self.config.money_decimals),
            currency_symbol=self.config.currency_symbol,
            money_decimals=self.config.money_decimals,
        )

        logger.debug(
            "Quote for %s from lender %r: rate=%s monthly=%s total=%s",
            requested_amount,
            self.offer.lender,
            quote.rate_display,
            quote.monthly_repayment_display,
            quote.total_repayment_display,
        )
        return quote
