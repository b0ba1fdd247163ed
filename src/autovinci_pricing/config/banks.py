"""Lender rate card and directory — indicative car-loan rates, limits and fees."""

from typing import Literal

from pydantic import BaseModel, Field


class BankOffer(BaseModel):
    """One lender's headline car-loan rate."""

    bank: str = Field(min_length=1, description="Lender display name")
    annual_rate_percent: float = Field(ge=0, le=100, description="Headline rate (% p.a.)")


DEFAULT_BANK_OFFERS: tuple[BankOffer, ...] = (
    BankOffer(bank="SBI", annual_rate_percent=8.65),
    BankOffer(bank="HDFC Bank", annual_rate_percent=8.75),
    BankOffer(bank="ICICI Bank", annual_rate_percent=8.80),
    BankOffer(bank="Axis Bank", annual_rate_percent=8.90),
    BankOffer(bank="Kotak", annual_rate_percent=8.95),
    BankOffer(bank="Bank of Baroda", annual_rate_percent=8.60),
)


LenderType = Literal["Public", "Private", "NBFC"]


class LenderProfile(BaseModel):
    """One lender in the car-loan directory: limits, fees and category."""

    bank: str = Field(min_length=1, description="Lender display name")
    lender_type: LenderType = Field(description="Public sector bank, private bank or NBFC")
    annual_rate_percent: float = Field(ge=0, le=100, description="Starting rate (% p.a.)")
    max_tenure_months: int = Field(ge=1, le=360, description="Longest tenure offered (months)")
    max_amount: float = Field(gt=0, description="Largest loan sanctioned (₹)")
    processing_fee_pct: float = Field(ge=0, le=100, description="Processing fee (% of loan amount)")


LENDER_DIRECTORY: tuple[LenderProfile, ...] = (
    LenderProfile(bank="SBI", lender_type="Public", annual_rate_percent=8.60,
                  max_tenure_months=84, max_amount=7_500_000, processing_fee_pct=0.5),
    LenderProfile(bank="HDFC Bank", lender_type="Private", annual_rate_percent=8.75,
                  max_tenure_months=84, max_amount=5_000_000, processing_fee_pct=0.5),
    LenderProfile(bank="ICICI Bank", lender_type="Private", annual_rate_percent=8.80,
                  max_tenure_months=84, max_amount=5_000_000, processing_fee_pct=0.5),
    LenderProfile(bank="Axis Bank", lender_type="Private", annual_rate_percent=8.90,
                  max_tenure_months=84, max_amount=4_000_000, processing_fee_pct=1.0),
    LenderProfile(bank="Kotak", lender_type="Private", annual_rate_percent=8.95,
                  max_tenure_months=84, max_amount=3_500_000, processing_fee_pct=0.5),
    LenderProfile(bank="Bank of Baroda", lender_type="Public", annual_rate_percent=8.60,
                  max_tenure_months=84, max_amount=6_000_000, processing_fee_pct=0.25),
    LenderProfile(bank="PNB", lender_type="Public", annual_rate_percent=8.65,
                  max_tenure_months=84, max_amount=5_000_000, processing_fee_pct=0.35),
    LenderProfile(bank="Bajaj Finance", lender_type="NBFC", annual_rate_percent=9.50,
                  max_tenure_months=60, max_amount=2_500_000, processing_fee_pct=2.0),
)
