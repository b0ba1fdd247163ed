"""Result types — the contract between the calculators and their callers.

Every result is derived deterministically from its input and recomputed, never
mutated in place. Monetary fields are whole rupees unless noted.
"""

from __future__ import annotations

from pydantic import BaseModel

from autovinci_pricing.config.breakdown import LineItem


# ═══════════════════════════════════════════════════════════════════════════
# Amortization
# ═══════════════════════════════════════════════════════════════════════════

class LoanResult(BaseModel):
    """Installment and totals for one loan (no down payment involved)."""

    monthly_installment: int
    total_paid: int
    """monthly_installment × term_months."""
    total_interest: int
    """total_paid − principal."""


class AmortizationRow(BaseModel):
    """One month of a repayment schedule."""

    month: int
    opening_balance: float
    interest: float
    principal: float
    installment: float
    closing_balance: float


class AmortizationSchedule(BaseModel):
    """Month-by-month repayment of a loan at its rounded installment.

    The final row absorbs rounding drift so ``closing_balance`` ends at 0 and
    the principal components sum to ``principal``.
    """

    principal: float
    monthly_rate: float
    monthly_installment: int
    rows: list[AmortizationRow]
    total_interest_paid: float
    total_principal_paid: float


# ═══════════════════════════════════════════════════════════════════════════
# Price breakdown
# ═══════════════════════════════════════════════════════════════════════════

class PriceBreakdownResult(BaseModel):
    """Itemised on-road price: ex-showroom plus surcharges, in input order."""

    ex_showroom_price: float
    line_items: list[LineItem]
    total: float
    """ex_showroom_price + Σ line_items.amount (always ≥ ex_showroom_price)."""

    @property
    def surcharge_total(self) -> float:
        return self.total - self.ex_showroom_price


# ═══════════════════════════════════════════════════════════════════════════
# Financing
# ═══════════════════════════════════════════════════════════════════════════

class FinancingPlan(BaseModel):
    """Everything the EMI calculator shows for one set of slider positions."""

    car_price: float
    down_payment: float
    """round(car_price × down_payment_pct / 100), never above car_price."""
    principal: float
    tenure_months: int
    annual_rate_percent: float
    monthly_installment: int
    total_paid: float
    """monthly_installment × tenure_months + down_payment."""
    total_interest: float
    """total_paid − car_price."""
    principal_share_pct: int
    """Principal as a share of the loan repayments (EMI × tenure), for the donut chart."""
    interest_share_pct: int
    interest_pct_of_price: float
    """total_interest / car_price × 100, one decimal."""

    # --- Display strings ---
    monthly_installment_display: str
    total_paid_display: str
    total_interest_display: str


class OnRoadQuote(BaseModel):
    """On-road breakdown with the EMI on its financed portion."""

    breakdown: PriceBreakdownResult
    finance_basis: str
    financing: FinancingPlan
    total_display: str
    line_item_displays: dict[str, str]


class BankEmiQuote(BaseModel):
    """EMI for the same loan at one lender's rate."""

    bank: str
    annual_rate_percent: float
    monthly_installment: int
    total_interest: int


class EligibilityResult(BaseModel):
    """Rough, pre-bureau loan eligibility estimate."""

    net_monthly_income: float
    eligible_amount: float
    eligible: bool
    indicative_rate_percent: float
    indicative_tenure_months: int
    indicative_emi: int
    low_credit_score: bool
    eligible_amount_display: str


class LenderListing(BaseModel):
    """One row of the lender directory, with its loan ceiling formatted."""

    bank: str
    lender_type: str
    annual_rate_percent: float
    max_tenure_months: int
    max_amount: float
    max_amount_display: str
    processing_fee_pct: float
