"""
Offer — Модель предложения кредитора

Immutable Pydantic модель: доступная сумма кредитора и годовая ставка.
Сырая строка рынка ({"Lender", "Rate", "Available"}) соответствует схеме
src/core/contracts/schema/offer.json.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from src.core.contracts.validators import validate_offer


# =============================================================================
# OFFER MODEL
# =============================================================================


class Offer(BaseModel):
    """
    Предложение одного кредитора.

    Immutable модель (frozen=True). annual_rate == 0 допустим как значение,
    но расчёт платежа по такому предложению не определён
    (см. AmortizationDomainViolation).

    Суммы хранятся как double. Целые суммы, которые float не представляет
    точно (часть целых больше 2**53, например 2**53 + 1), отклоняются: иначе can_fund
    не совпал бы с собственной суммой предложения.
    """

    lender: str = Field("", description="Имя кредитора")
    available_amount: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Сумма, которую кредитор может выдать"
    )
    annual_rate: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Годовая ставка (доля, 0.07 для 7%)"
    )

    model_config = {"frozen": True}

    @field_validator("available_amount", mode="before")
    @classmethod
    def validate_exact_integer_amount(cls, v: Any) -> Any:
        """Целая сумма должна точно представляться в double."""
        if isinstance(v, int) and not isinstance(v, bool):
            try:
                exact = float(v) == v
            except OverflowError:
                exact = False
            if not exact:
                raise ValueError(
                    f"available_amount {v} is not exactly representable as a float"
                )
        return v

    @classmethod
    def from_market_row(cls, row: Dict[str, Any]) -> "Offer":
        """
        Создание Offer из сырой строки рынка.

        Args:
            row: {"Lender": str, "Rate": number, "Available": number}

        Raises:
            jsonschema.ValidationError: если строка не соответствует контракту offer
        """
        validate_offer(row)
        return cls(
            lender=row.get("Lender", ""),
            available_amount=row["Available"],
            annual_rate=row["Rate"],
        )

    def to_market_row(self) -> Dict[str, Any]:
        """Обратная конверсия в формат строки рынка."""
        return {
            "Lender": self.lender,
            "Rate": self.annual_rate,
            "Available": self.available_amount,
        }

    def can_fund(self, requested_amount: float) -> bool:
        """
        Может ли кредитор полностью выдать запрошенную сумму.

        Требуется точное совпадение: ни частичного финансирования,
        ни превышения.
        """
        return self.available_amount == requested_amount
