"""
Core math modules для Lending Market

Математические примитивы расчёта займа с гарантией стабильности.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    is_close,
    # Rounding
    round_half_away_from_zero,
    # Validation
    validate_non_negative,
    validate_positive,
)

# Amortization
from src.core.math.amortization import (
    MONTHS_PER_YEAR,
    PAYMENT_PERIOD_MONTHS_DEFAULT,
    AmortizationDomainViolation,
    monthly_rate,
    monthly_repayment,
    total_repayment,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — NaN/Inf checks
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Numerical Safeguards — Rounding
    "round_half_away_from_zero",
    # Numerical Safeguards — Validation
    "validate_non_negative",
    "validate_positive",
    # Amortization — Constants
    "MONTHS_PER_YEAR",
    "PAYMENT_PERIOD_MONTHS_DEFAULT",
    # Amortization — Exceptions
    "AmortizationDomainViolation",
    # Amortization — Functions
    "monthly_rate",
    "monthly_repayment",
    "total_repayment",
]
