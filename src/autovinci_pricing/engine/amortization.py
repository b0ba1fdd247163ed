"""Amortization engine — fixed monthly installment for a fully-amortizing loan.

Key formulas:
  r   = annual_rate_percent / 100 / 12
  EMI = P × r × (1+r)^n / ((1+r)^n − 1)
  EMI = P / n                            when r = 0

Installments are whole rupees, rounded half-up.
"""

from __future__ import annotations

import logging
import math

from autovinci_pricing.config.loan import LoanInput
from autovinci_pricing.exceptions import InvalidLoanInputError
from autovinci_pricing.models.results import AmortizationRow, AmortizationSchedule, LoanResult
from autovinci_pricing.utils import round_half_up

logger = logging.getLogger(__name__)

# Below this the (1+r)^n − 1 denominator loses all precision.
_ZERO_RATE_EPSILON = 1e-12


def _validate(principal: float, annual_rate_percent: float, term_months: int) -> None:
    if isinstance(term_months, bool) or not isinstance(term_months, int):
        raise InvalidLoanInputError(f"term_months must be a whole number of months, got {term_months!r}")
    if term_months < 1:
        raise InvalidLoanInputError(f"term_months must be >= 1, got {term_months}")
    if math.isnan(principal) or math.isinf(principal) or principal < 0:
        raise InvalidLoanInputError(f"principal must be a finite amount >= 0, got {principal}")
    if math.isnan(annual_rate_percent) or not 0 <= annual_rate_percent <= 100:
        raise InvalidLoanInputError(f"annual_rate_percent must be in [0, 100], got {annual_rate_percent}")


def monthly_rate(annual_rate_percent: float) -> float:
    """Monthly periodic rate from an annual percentage (9.5 → 0.0079166…)."""
    return annual_rate_percent / 100 / 12


def monthly_installment(principal: float, annual_rate_percent: float, term_months: int) -> int:
    """Fixed monthly installment (EMI) for a fully-amortizing loan.

    Parameters
    ----------
    principal : float
        Amount financed (₹). 0 means no loan and yields 0.
    annual_rate_percent : float
        Nominal annual rate in percent (e.g. 9.5).
    term_months : int
        Number of monthly payments (>= 1).

    Returns
    -------
    int
        Installment in whole rupees, rounded half-up. For a positive rate the
        installment never repays less than the principal over the term; where
        nearest-rupee rounding would do so it rounds up instead.

    Raises
    ------
    InvalidLoanInputError
        On negative principal, a rate outside [0, 100] or a term below one
        month.
    """
    _validate(principal, annual_rate_percent, term_months)

    if principal == 0:
        return 0

    r = monthly_rate(annual_rate_percent)
    n = term_months

    if r < _ZERO_RATE_EPSILON:
        raw = principal / n
    else:
        factor = (1 + r) ** n
        raw = principal * r * factor / (factor - 1)

    emi = round_half_up(raw)
    # Any positive rate must repay at least the principal.
    if r > 0 and emi * n < principal:
        emi = math.ceil(raw)
    return emi


def compute_loan(loan: LoanInput) -> LoanResult:
    """Installment plus totals for a validated ``LoanInput``."""
    emi = monthly_installment(loan.principal, loan.annual_rate_percent, loan.term_months)
    total_paid = emi * loan.term_months
    result = LoanResult(
        monthly_installment=emi,
        total_paid=total_paid,
        total_interest=round_half_up(total_paid - loan.principal),
    )
    logger.debug(
        "EMI %d for principal=%.2f rate=%.2f%% term=%d",
        emi, loan.principal, loan.annual_rate_percent, loan.term_months,
    )
    return result


def build_amortization_schedule(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
) -> AmortizationSchedule:
    """Generate the month-by-month repayment schedule at the rounded EMI.

    Parameters
    ----------
    principal : float
        Amount financed (₹).
    annual_rate_percent : float
        Nominal annual rate in percent.
    term_months : int
        Loan tenure in months.

    Returns
    -------
    AmortizationSchedule
        One row per month. The last installment settles whatever balance is
        left, so the schedule closes at exactly 0.
    """
    emi = monthly_installment(principal, annual_rate_percent, term_months)
    r = monthly_rate(annual_rate_percent)

    if principal == 0:
        return AmortizationSchedule(
            principal=0, monthly_rate=round(r, 8), monthly_installment=0, rows=[],
            total_interest_paid=0, total_principal_paid=0,
        )

    rows: list[AmortizationRow] = []
    balance = float(principal)
    total_interest = 0.0
    total_principal = 0.0

    for m in range(1, term_months + 1):
        interest = balance * r
        if m == term_months:
            # Final installment absorbs rounding drift
            principal_part = balance
        else:
            principal_part = min(emi - interest, balance)
        payment = interest + principal_part
        closing = balance - principal_part

        rows.append(AmortizationRow(
            month=m,
            opening_balance=round(balance, 2),
            interest=round(interest, 2),
            principal=round(principal_part, 2),
            installment=round(payment, 2),
            closing_balance=round(max(closing, 0), 2),
        ))

        total_interest += interest
        total_principal += principal_part
        balance = max(closing, 0)

    return AmortizationSchedule(
        principal=round(principal, 2),
        monthly_rate=round(r, 8),
        monthly_installment=emi,
        rows=rows,
        total_interest_paid=round(total_interest, 2),
        total_principal_paid=round(total_principal, 2),
    )
