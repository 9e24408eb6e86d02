"""
QuoteResult — Модель котировки займа

Immutable Pydantic модель результата расчёта котировки.
Сериализованная форма соответствует схеме src/core/contracts/schema/quote_result.json.
"""

from typing import Dict

from pydantic import BaseModel, Field

from src.core.contracts.validators import validate_quote_result


# =============================================================================
# QUOTE RESULT MODEL
# =============================================================================


class QuoteResult(BaseModel):
    """
    Котировка займа.

    Immutable модель (frozen=True). Суммы monthly_repayment и
    total_repayment уже округлены до money_decimals знаков.
    """

    rate_display: str = Field(..., min_length=2, description="Ставка, например '7.0%'")
    requested_amount_display: str = Field(
        ..., min_length=2, description="Запрошенная сумма, например '£1000'"
    )
    monthly_repayment: float = Field(..., allow_inf_nan=False, description="Ежемесячный платёж")
    total_repayment: float = Field(..., allow_inf_nan=False, description="Полная сумма выплат")

    currency_symbol: str = Field("£", min_length=1, description="Символ валюты")
    money_decimals: int = Field(2, ge=1, description="Знаков после запятой для сумм")

    model_config = {"frozen": True}

    def _format_money(self, value: float) -> str:
        return f"{self.currency_symbol}{value:.{self.money_decimals}f}"

    @property
    def monthly_repayment_display(self) -> str:
        """Ежемесячный платёж с символом валюты, например '£30.88'.

        Всегда ровно money_decimals знаков: 14.9 отображается как '£14.90',
        а не '£14.9'.
        """
        return self._format_money(self.monthly_repayment)

    @property
    def total_repayment_display(self) -> str:
        """Полная сумма выплат с символом валюты, например '£1111.58' (с нулями в конце)."""
        return self._format_money(self.total_repayment)

    def to_contract(self) -> Dict[str, str]:
        """
        Сериализация в контракт quote_result.

        Raises:
            jsonschema.ValidationError: если результат нарушает контракт
        """
        data = {
            "rate": self.rate_display,
            "requested_amount": self.requested_amount_display,
            "monthly_repayment": self.monthly_repayment_display,
            "total_repayment": self.total_repayment_display,
        }
        validate_quote_result(data)
        return data
