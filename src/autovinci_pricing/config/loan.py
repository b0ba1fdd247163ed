"""Loan inputs — one amortizing loan, and a full car-financing request."""

from pydantic import BaseModel, Field


class LoanInput(BaseModel):
    """Principal, rate and term of a fully-amortizing loan.

    Constructed fresh on every recomputation; never stored.
    """

    principal: float = Field(default=0.0, ge=0, description="Amount financed (₹)")
    annual_rate_percent: float = Field(
        default=8.75, ge=0, le=100,
        description="Nominal annual interest rate in percent (e.g. 9.5 for 9.5% p.a.). "
                    "Lenders typically quote 7–18.",
    )
    term_months: int = Field(default=60, ge=1, le=360, description="Loan tenure (months)")


class FinancingRequest(BaseModel):
    """What a buyer sets on the EMI calculator: price, down payment, tenure, rate."""

    car_price: float = Field(default=1_000_000.0, gt=0, description="Vehicle price being financed against (₹)")
    down_payment_pct: float = Field(
        default=20.0, ge=0, le=100,
        description="Down payment as percent of car_price. 100 = paid in full, no loan.",
    )
    tenure_months: int = Field(default=60, ge=1, le=360, description="Loan tenure (months)")
    annual_rate_percent: float = Field(default=8.75, ge=0, le=100, description="Annual interest rate (%)")


def tenure_months_from_years(years: float) -> int:
    """Convert a tenure slider in years (1–7, may be fractional) to whole months."""
    months = int(round(years * 12))
    if months < 1:
        raise ValueError("tenure must be at least one month")
    return months
