"""
Amortization — аннуитетный платёж по займу

Модуль вычисляет фиксированный ежемесячный платёж и полную сумму выплат
по стандартной формуле аннуитета (compound interest):

ФОРМУЛЫ:
    i = annual_rate / 12
    P = L·i / (1 - (1 + i)^-n)
    total = n · P

    L: сумма займа, i: месячная ставка, n: количество платежей (месяцев)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все вычисления в double precision, без промежуточного округления
2. total_repayment считается из неокруглённого monthly_repayment
3. annual_rate == 0 → AmortizationDomainViolation (формула вырождается в 0/0)
"""

from typing import Final

from src.core.math.numerical_safeguards import (
    is_valid_float,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# CONSTANTS
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12

# Стандартный срок займа (месяцев)
PAYMENT_PERIOD_MONTHS_DEFAULT: Final[int] = 36


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AmortizationDomainViolation(ValueError):
    """
    Формула аннуитета не определена для заданных параметров.

    Возникает при annual_rate == 0: числитель L·i и знаменатель 1 - (1+i)^-n
    одновременно равны нулю. Значение не подбирается молча.
    """
    pass


# =============================================================================
# FUNCTIONS
# =============================================================================


def monthly_rate(annual_rate: float) -> float:
    """
    Месячная ставка из годовой: i = annual_rate / 12.

    Examples:
        >>> monthly_rate(0.12)
        0.01
    """
    validate_non_negative(annual_rate, "annual_rate")
    return annual_rate / MONTHS_PER_YEAR


def monthly_repayment(
    principal: float,
    annual_rate: float,
    payment_period: int = PAYMENT_PERIOD_MONTHS_DEFAULT,
) -> float:
    """
    Ежемесячный аннуитетный платёж: P = L·i / (1 - (1 + i)^-n).

    Args:
        principal: Сумма займа L (> 0)
        annual_rate: Годовая ставка (доля, например 0.07 для 7%)
        payment_period: Количество ежемесячных платежей n (> 0)

    Returns:
        Неокруглённый ежемесячный платёж

    Raises:
        AmortizationDomainViolation: если annual_rate == 0
        ValueError: если параметры вне домена или NaN/Inf

    Examples:
        >>> round(monthly_repayment(1000, 0.07, 36), 2)
        30.88
    """
    validate_positive(principal, "principal")
    if payment_period <= 0:
        raise ValueError(f"payment_period must be positive, got {payment_period}")

    i = monthly_rate(annual_rate)
    if i == 0.0:
        raise AmortizationDomainViolation(
            f"Amortization is undefined for annual_rate={annual_rate}: "
            f"L*i / (1 - (1+i)^-n) reduces to 0/0"
        )

    denominator = 1.0 - (1.0 + i) ** (-payment_period)
    if denominator <= 0.0:
        raise AmortizationDomainViolation(
            f"Amortization denominator is not positive ({denominator!r}) "
            f"for annual_rate={annual_rate}, payment_period={payment_period}"
        )

    payment = (principal * i) / denominator
    if not is_valid_float(payment):
        raise AmortizationDomainViolation(
            f"Monthly repayment is not finite for principal={principal}, "
            f"annual_rate={annual_rate}, payment_period={payment_period}"
        )

    return payment


def total_repayment(
    principal: float,
    annual_rate: float,
    payment_period: int = PAYMENT_PERIOD_MONTHS_DEFAULT,
) -> float:
    """
    Полная сумма выплат за срок займа: total = n · P.

    Examples:
        >>> round(total_repayment(1000, 0.07, 36), 2)
        1111.58
    """
    return payment_period * monthly_repayment(principal, annual_rate, payment_period)
