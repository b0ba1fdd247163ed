"""Loan eligibility inputs — the applicant profile from the eligibility form."""

from typing import Literal

from pydantic import BaseModel, Field

Employment = Literal["Salaried", "Self-Employed", "Business"]
CreditBand = Literal["750-900", "700-749", "650-699", "unknown"]


class EligibilityInput(BaseModel):
    """Applicant profile used for a rough, pre-bureau eligibility estimate."""

    employment: Employment = Field(default="Salaried", description="Employment type")
    monthly_income: float = Field(default=60_000.0, ge=0, description="Gross monthly income (₹)")
    existing_emi: float = Field(default=0.0, ge=0, description="EMIs already being paid each month (₹)")
    credit_band: CreditBand = Field(default="750-900", description="Self-reported CIBIL band")


class EligibilityPolicy(BaseModel):
    """Lending rules behind the estimate."""

    income_multiple: float = Field(default=30.0, gt=0, description="Loan = net monthly income × this")
    max_loan_amount: float = Field(default=5_000_000.0, gt=0, description="Cap on eligible amount (₹50 L)")
    salaried_rate_percent: float = Field(default=8.75, ge=0, le=100)
    other_rate_percent: float = Field(default=9.5, ge=0, le=100)
    low_credit_bands: list[CreditBand] = Field(default_factory=lambda: ["650-699"])
    indicative_tenure_months: int = Field(default=60, ge=1, le=360)
