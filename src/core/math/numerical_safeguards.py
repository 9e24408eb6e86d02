"""
Numerical Safeguards — Safe Math Primitives для расчёта котировок

Модуль обеспечивает численную устойчивость расчётов займа:
- Проверка NaN/Inf для входных сумм и ставок
- Округление "half away from zero" (не banker's rounding)
- Epsilon-сравнения float
- Валидация положительных и неотрицательных параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление всегда выполняется по десятичному представлению float
   (2.675 → 2.68), а не по двоичному значению
2. NaN/Inf никогда не проходят валидацию
3. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away_from_zero(value: float, decimals: int) -> float:
    """
    Округление до заданного числа знаков после запятой, "half away from zero".

    Встроенный round() использует banker's rounding и двоичное значение float
    (round(2.675, 2) == 2.67). Здесь округляется кратчайшее десятичное
    представление числа, поэтому 2.675 → 2.68, а 0.125 → 0.13.

    Args:
        value: Значение для округления (finite)
        decimals: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение

    Raises:
        ValueError: если value NaN/Inf или decimals < 0

    Examples:
        >>> round_half_away_from_zero(30.877, 2)
        30.88
        >>> round_half_away_from_zero(2.675, 2)
        2.68
        >>> round_half_away_from_zero(-0.05, 1)
        -0.1
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot round NaN/Inf: {value}")

    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)

    return float(rounded)


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
