"""Tests for engine/amortization.py — EMI formula, edge cases, schedule."""

from __future__ import annotations

import math

import pytest

from autovinci_pricing.config import LoanInput
from autovinci_pricing.engine.amortization import (
    build_amortization_schedule,
    compute_loan,
    monthly_installment,
    monthly_rate,
)
from autovinci_pricing.exceptions import InvalidLoanInputError, PricingError

from conftest import emi_formula


# ═══════════════════════════════════════════════════════════════════════════
# monthly_installment
# ═══════════════════════════════════════════════════════════════════════════

class TestMonthlyInstallment:
    """Closed-form EMI with whole-rupee rounding."""

    def test_standard_car_loan_matches_formula(self):
        """8,40,000 at 9.5% for 60 months (10,50,000 car, 20% down)."""
        emi = monthly_installment(840_000, 9.5, 60)
        expected = math.floor(emi_formula(840_000, 9.5, 60) + 0.5)
        assert emi == expected
        assert 17_640 <= emi <= 17_650

    def test_returns_int(self):
        assert isinstance(monthly_installment(500_000, 12, 24), int)

    def test_known_value_12_percent(self):
        """500k, 12%, 24 months → 23,536.74 → 23,537."""
        assert monthly_installment(500_000, 12, 24) == 23_537

    def test_known_value_15_percent(self):
        """500k, 15%, 24 months → 24,243.32 → 24,243."""
        assert monthly_installment(500_000, 15, 24) == 24_243

    def test_one_month_tenure(self):
        """Single payment = principal plus one month's interest."""
        assert monthly_installment(100_000, 12, 1) == 101_000

    def test_zero_principal_is_zero(self):
        for rate, term in [(0, 1), (9.5, 60), (18, 84), (100, 360)]:
            assert monthly_installment(0, rate, term) == 0

    def test_zero_rate_is_plain_division(self):
        assert monthly_installment(120_000, 0, 12) == 10_000

    def test_zero_rate_rounds_half_up(self):
        # 100 / 8 = 12.5 → 13
        assert monthly_installment(100, 0, 8) == 13

    def test_higher_rate_higher_emi(self):
        low = monthly_installment(800_000, 7, 60)
        high = monthly_installment(800_000, 18, 60)
        assert high > low

    def test_longer_tenure_lower_emi(self):
        short = monthly_installment(800_000, 9, 36)
        long = monthly_installment(800_000, 9, 84)
        assert long < short

    @pytest.mark.parametrize("principal", [1_000, 50_000, 840_000, 2_500_000, 50_000_000])
    @pytest.mark.parametrize("rate", [0.5, 7.0, 9.5, 18.0])
    @pytest.mark.parametrize("term", [1, 12, 60, 84])
    def test_repays_at_least_principal(self, principal, rate, term):
        emi = monthly_installment(principal, rate, term)
        assert emi > 0
        assert emi * term >= principal

    def test_micro_loan_never_rounds_below_principal(self):
        """Nearest-rupee rounding would give 1 × 100 < 110; rounds up instead."""
        emi = monthly_installment(110, 0.1, 100)
        assert emi == 2
        assert emi * 100 >= 110

    def test_tiny_principal_still_positive(self):
        assert monthly_installment(1, 0.01, 360) == 1

    def test_vanishing_positive_rate_repays_principal(self):
        """A rate too small for the closed form still rounds up, not to nearest."""
        emi = monthly_installment(100, 1e-10, 3)
        assert emi == 34
        assert emi * 3 >= 100

    def test_exact_zero_rate_keeps_nearest_rupee(self):
        assert monthly_installment(100, 0, 3) == 33


class TestInvalidLoanInput:
    """Out-of-range inputs are rejected, not clamped."""

    def test_negative_principal(self):
        with pytest.raises(InvalidLoanInputError):
            monthly_installment(-1, 10, 12)

    def test_negative_rate(self):
        with pytest.raises(InvalidLoanInputError):
            monthly_installment(100_000, -0.5, 12)

    def test_rate_above_hundred(self):
        with pytest.raises(InvalidLoanInputError):
            monthly_installment(100_000, 100.5, 12)

    def test_zero_term(self):
        with pytest.raises(InvalidLoanInputError):
            monthly_installment(100_000, 10, 0)

    def test_negative_term(self):
        with pytest.raises(InvalidLoanInputError):
            monthly_installment(100_000, 10, -12)

    def test_fractional_term(self):
        with pytest.raises(InvalidLoanInputError):
            monthly_installment(100_000, 10, 12.5)

    def test_nan_principal(self):
        with pytest.raises(InvalidLoanInputError):
            monthly_installment(float("nan"), 10, 12)

    def test_nan_rate(self):
        with pytest.raises(InvalidLoanInputError):
            monthly_installment(100_000, float("nan"), 12)

    def test_is_value_error_and_pricing_error(self):
        with pytest.raises(ValueError):
            monthly_installment(-1, 10, 12)
        with pytest.raises(PricingError):
            monthly_installment(-1, 10, 12)


# ═══════════════════════════════════════════════════════════════════════════
# compute_loan / monthly_rate
# ═══════════════════════════════════════════════════════════════════════════

def test_monthly_rate():
    assert monthly_rate(12) == pytest.approx(0.01)
    assert monthly_rate(9.5) == pytest.approx(0.0079166667)


def test_compute_loan_totals(standard_loan: LoanInput):
    result = compute_loan(standard_loan)
    assert result.monthly_installment == monthly_installment(840_000, 9.5, 60)
    assert result.total_paid == result.monthly_installment * 60
    assert result.total_interest == result.total_paid - 840_000
    assert result.total_interest > 0


def test_compute_loan_zero_rate():
    result = compute_loan(LoanInput(principal=120_000, annual_rate_percent=0, term_months=12))
    assert result.monthly_installment == 10_000
    assert result.total_interest == 0


# ═══════════════════════════════════════════════════════════════════════════
# build_amortization_schedule
# ═══════════════════════════════════════════════════════════════════════════

class TestAmortizationSchedule:
    def test_row_count(self):
        sched = build_amortization_schedule(840_000, 9.5, 60)
        assert len(sched.rows) == 60
        assert [r.month for r in sched.rows] == list(range(1, 61))

    def test_first_month_interest(self):
        sched = build_amortization_schedule(840_000, 9.5, 60)
        # 8,40,000 × 9.5% / 12 = 6,650
        assert sched.rows[0].interest == pytest.approx(6_650.0)
        assert sched.rows[0].opening_balance == 840_000

    def test_closes_at_zero(self):
        sched = build_amortization_schedule(840_000, 9.5, 60)
        assert sched.rows[-1].closing_balance == 0

    def test_principal_components_sum_to_loan(self):
        sched = build_amortization_schedule(840_000, 9.5, 60)
        assert sched.total_principal_paid == pytest.approx(840_000, abs=0.01)

    def test_installments_match_emi_until_last(self):
        sched = build_amortization_schedule(840_000, 9.5, 60)
        for row in sched.rows[:-1]:
            assert row.installment == pytest.approx(sched.monthly_installment, abs=0.01)
        # Last one absorbs at most half a rupee per month of rounding drift
        assert abs(sched.rows[-1].installment - sched.monthly_installment) <= 50

    def test_balance_decreases(self):
        sched = build_amortization_schedule(840_000, 9.5, 60)
        for prev, cur in zip(sched.rows, sched.rows[1:]):
            assert cur.closing_balance < prev.closing_balance

    def test_interest_share_falls_over_time(self):
        sched = build_amortization_schedule(840_000, 9.5, 60)
        assert sched.rows[0].interest > sched.rows[-1].interest

    def test_zero_rate_schedule(self):
        sched = build_amortization_schedule(100, 0, 3)
        assert [r.installment for r in sched.rows] == [33, 33, 34]
        assert sched.total_interest_paid == 0

    def test_zero_principal(self):
        sched = build_amortization_schedule(0, 9.5, 60)
        assert sched.rows == []
        assert sched.monthly_installment == 0

    def test_invalid_input_propagates(self):
        with pytest.raises(InvalidLoanInputError):
            build_amortization_schedule(100_000, 9.5, 0)
