"""
Тесты для Amortization — аннуитетный платёж

Проверяемые инварианты:
1. P = L·i / (1 - (1+i)^-n) на эталонных значениях
2. total = n · P без промежуточного округления
3. annual_rate == 0 → AmortizationDomainViolation
4. Валидация домена параметров
"""

import pytest

from src.core.math.amortization import (
    MONTHS_PER_YEAR,
    PAYMENT_PERIOD_MONTHS_DEFAULT,
    AmortizationDomainViolation,
    monthly_rate,
    monthly_repayment,
    total_repayment,
)
from src.core.math.numerical_safeguards import round_half_away_from_zero


class TestConstants:
    def test_constants(self):
        assert MONTHS_PER_YEAR == 12
        assert PAYMENT_PERIOD_MONTHS_DEFAULT == 36


class TestMonthlyRate:
    """Тесты monthly_rate."""

    def test_annual_to_monthly(self):
        assert monthly_rate(0.12) == pytest.approx(0.01)
        assert monthly_rate(0.0) == 0.0

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="annual_rate"):
            monthly_rate(-0.01)


class TestMonthlyRepayment:
    """Тесты monthly_repayment."""

    def test_reference_values(self):
        assert round_half_away_from_zero(monthly_repayment(1000, 0.07, 36), 2) == 30.88
        assert round_half_away_from_zero(monthly_repayment(1200, 0.0453, 36), 2) == 35.71

    def test_default_period(self):
        assert monthly_repayment(1000, 0.07) == monthly_repayment(1000, 0.07, 36)

    def test_single_period_is_principal_plus_interest(self):
        """n = 1: P = L·(1 + i)."""
        assert monthly_repayment(1200, 0.12, 1) == pytest.approx(1212.0)

    def test_small_rate_approaches_straight_line(self):
        """i → 0: P → L / n."""
        assert monthly_repayment(1000, 1e-6, 36) == pytest.approx(1000 / 36, rel=1e-4)

    def test_linear_in_principal(self):
        assert monthly_repayment(2000, 0.07, 36) == pytest.approx(
            2 * monthly_repayment(1000, 0.07, 36)
        )

    def test_higher_rate_higher_payment(self):
        assert monthly_repayment(1000, 0.08, 36) > monthly_repayment(1000, 0.07, 36)

    def test_zero_rate_domain_violation(self):
        with pytest.raises(AmortizationDomainViolation, match="0/0"):
            monthly_repayment(1000, 0.0, 36)

    def test_domain_violation_is_value_error(self):
        assert issubclass(AmortizationDomainViolation, ValueError)

    @pytest.mark.parametrize("principal", [0, -100, float("nan")])
    def test_invalid_principal(self, principal):
        with pytest.raises(ValueError, match="principal"):
            monthly_repayment(principal, 0.07, 36)

    @pytest.mark.parametrize("period", [0, -12])
    def test_invalid_period(self, period):
        with pytest.raises(ValueError, match="payment_period"):
            monthly_repayment(1000, 0.07, period)


class TestTotalRepayment:
    """Тесты total_repayment."""

    def test_reference_values(self):
        assert round_half_away_from_zero(total_repayment(1000, 0.07, 36), 2) == 1111.58
        assert round_half_away_from_zero(total_repayment(1200, 0.0453, 36), 2) == 1285.65

    def test_total_is_period_times_monthly(self):
        assert total_repayment(1000, 0.07, 36) == 36 * monthly_repayment(1000, 0.07, 36)

    def test_total_exceeds_principal(self):
        assert total_repayment(1000, 0.07, 36) > 1000
