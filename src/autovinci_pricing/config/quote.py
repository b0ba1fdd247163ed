"""On-road quote request — breakdown plus financing of part of it."""

from typing import Literal

from pydantic import BaseModel, Field

from autovinci_pricing.config.surcharges import SurchargeRule


class OnRoadQuoteRequest(BaseModel):
    """Price a variant on-road and quote the EMI on the financed portion.

    ``rules`` = None uses the standard RTO / insurance / TCS / handling set,
    or its city variant when ``city`` is set.
    """

    ex_showroom_price: float = Field(gt=0, description="Variant ex-showroom price (₹)")
    rules: list[SurchargeRule] | None = Field(default=None, description="Surcharge rules; None = defaults")
    city: str | None = Field(
        default=None,
        description="Price registration at this city's flat fee (unknown cities use Delhi). Ignored when rules are given.",
    )
    finance_basis: Literal["on_road", "ex_showroom"] = Field(
        default="on_road",
        description="Which figure the down payment and loan are computed from. "
                    "'on_road' = total including surcharges; 'ex_showroom' = base price only.",
    )
    down_payment_pct: float = Field(default=20.0, ge=0, le=100, description="Down payment (% of basis)")
    tenure_months: int = Field(default=60, ge=1, le=360, description="Loan tenure (months)")
    annual_rate_percent: float = Field(default=8.75, ge=0, le=100, description="Annual interest rate (%)")
