"""Context manifest generator — makes the pricing service self-describing.

Produces structured context at two detail levels:
  - ``compact``: parameter schemas + descriptions
  - ``full``:    adds formulas, surcharge rules and interpretation notes

Page views and integrators read ``GET /context`` once to learn which inputs
each calculator takes and what the outputs mean.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from autovinci_pricing import __version__
from autovinci_pricing.config import (
    BankOffer,
    EligibilityInput,
    EligibilityPolicy,
    FinancingRequest,
    LoanInput,
    OnRoadQuoteRequest,
)


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one calculator's inputs (e.g. loan, financing)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str
    request_body: str = ""
    response: str = ""


class PricingContext(BaseModel):
    """Full self-describing context for API consumers."""
    service_name: str
    version: str
    description: str
    key_formulas: list[dict[str, str]]
    input_sections: list[SectionSchema]
    endpoints: list[EndpointInfo]
    interpretation_guide: str


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

_BOUND_ATTRS = ("ge", "gt", "le", "lt")


def _type_name(annotation: Any) -> str:
    if type(annotation) is type:
        return annotation.__name__
    return str(annotation).replace("typing.", "")


def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """One ParameterInfo per field: default, numeric bounds and description."""
    params: list[ParameterInfo] = []
    for name, field in model_cls.model_fields.items():
        bounds = {
            attr: getattr(meta, attr)
            for meta in field.metadata
            for attr in _BOUND_ATTRS
            if getattr(meta, attr, None) is not None
        }
        params.append(ParameterInfo(
            name=name,
            type=_type_name(field.annotation),
            default=None if field.is_required() else field.get_default(call_default_factory=True),
            description=field.description or "",
            constraints=bounds,
        ))
    return params


# ═══════════════════════════════════════════════════════════════════════════
# Context builders
# ═══════════════════════════════════════════════════════════════════════════

_KEY_FORMULAS = [
    {
        "name": "Monthly installment (EMI)",
        "formula": "round(P × r × (1+r)^n / ((1+r)^n − 1)),  r = rate% / 100 / 12",
        "meaning": "Fixed monthly payment that fully repays P over n months. r = 0 → round(P / n).",
    },
    {
        "name": "Down payment",
        "formula": "round(car_price × down_payment_pct / 100)",
        "meaning": "Paid upfront; the rest of the price is financed.",
    },
    {
        "name": "Total paid",
        "formula": "EMI × n + down_payment",
        "meaning": "Everything the buyer pays over the life of the loan, down payment included.",
    },
    {
        "name": "Total interest",
        "formula": "total_paid − car_price",
        "meaning": "Cost of borrowing.",
    },
    {
        "name": "On-road price",
        "formula": "ex_showroom + RTO (10%) + insurance (by price band) + TCS (1%) + handling (₹15,000)",
        "meaning": "What the buyer pays to drive the car away. Insurance: < ₹10 L → ₹25,000; < ₹15 L → ₹32,000; else ₹45,000.",
    },
    {
        "name": "Loan eligibility",
        "formula": "min((monthly_income − existing_emi) × 30, ₹50 L)",
        "meaning": "Indicative ceiling before a credit bureau check.",
    },
]

_INTERPRETATION_GUIDE = """
HOW TO READ RESULTS:

1. MONEY:
   Installments and down payments are whole rupees (halves round up).
   *_display fields use the Indian convention: ≥ 1 crore → "1.25 Cr",
   ≥ 1 lakh → "10.50 L", otherwise lakh-grouped digits such as "99,999".

2. FINANCING:
   principal_share_pct / interest_share_pct split the loan repayments
   (EMI × tenure), not the down payment.

3. ON-ROAD:
   finance_basis='on_road' finances the full on-road total;
   'ex_showroom' finances only the base price, as dealer quotes often do.
   city=<name> prices registration at that city's flat fee instead of 10 %
   (unknown cities use the Delhi fee).

4. ERRORS:
   Out-of-range inputs (negative principal, rate outside 0–100, tenure
   below one month, negative surcharges) are rejected with HTTP 422 rather
   than producing a zero or infinite figure.
"""

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/context", description="This manifest. detail_level='compact' omits formulas and guide.", response="PricingContext"),
    EndpointInfo(method="GET", path="/defaults", description="Default inputs for every calculator.", response="dict of section → defaults"),
    EndpointInfo(method="POST", path="/emi", description="EMI and totals for one loan.", request_body="LoanInput", response="LoanResult"),
    EndpointInfo(method="POST", path="/emi/schedule", description="Month-by-month amortization schedule.", request_body="LoanInput", response="AmortizationSchedule"),
    EndpointInfo(method="POST", path="/financing", description="EMI calculator read-out for price, down payment, tenure and rate.", request_body="FinancingRequest (partial)", response="FinancingPlan"),
    EndpointInfo(method="POST", path="/price-breakdown", description="Itemised on-road price for an ex-showroom price and optional rules.", request_body="{ex_showroom_price, rules?, city?}", response="PriceBreakdownResult"),
    EndpointInfo(method="POST", path="/on-road", description="On-road breakdown plus EMI on the financed portion.", request_body="OnRoadQuoteRequest (partial)", response="OnRoadQuote"),
    EndpointInfo(method="GET", path="/banks", description="Default lender rate card.", response="list[BankOffer]"),
    EndpointInfo(method="GET", path="/banks/directory", description="Lender directory: limits, processing fees; filter by lender_type, sort_by rate or max_amount.", response="list[LenderListing]"),
    EndpointInfo(method="GET", path="/cities", description="Flat registration fee by city.", response="dict of city → fee"),
    EndpointInfo(method="POST", path="/banks/compare", description="Same loan priced at each lender's rate, cheapest first.", request_body="{principal, tenure_months, offers?}", response="list[BankEmiQuote]"),
    EndpointInfo(method="POST", path="/eligibility", description="Indicative loan eligibility from income and existing EMIs.", request_body="EligibilityInput (partial)", response="EligibilityResult"),
    EndpointInfo(method="GET", path="/format", description="Format a rupee amount in the Indian convention.", response="{display, full, emi_short}"),
]

_INPUT_SECTIONS = [
    ("loan", LoanInput, "One fully-amortizing loan — principal, annual rate, tenure"),
    ("financing", FinancingRequest, "EMI calculator sliders — car price, down payment, tenure, rate"),
    ("on_road", OnRoadQuoteRequest, "On-road quote — ex-showroom price, surcharge rules, financing basis"),
    ("bank_offer", BankOffer, "One lender on the rate card"),
    ("eligibility", EligibilityInput, "Applicant profile for the eligibility estimate"),
    ("eligibility_policy", EligibilityPolicy, "Lending rules behind the eligibility estimate"),
]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(detail_level: Literal["compact", "full"] = "full") -> PricingContext:
    """Build the self-describing context manifest."""
    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(model_cls))
        for name, model_cls, desc in _INPUT_SECTIONS
    ]

    return PricingContext(
        service_name="Autovinci Pricing",
        version=__version__,
        description=(
            "EMI, amortization, on-road price breakdown, lender comparison and "
            "loan eligibility for the Autovinci car marketplace, with rupee amounts "
            "formatted in the Indian numbering convention."
        ),
        key_formulas=_KEY_FORMULAS if detail_level == "full" else [],
        input_sections=sections,
        endpoints=_ENDPOINTS,
        interpretation_guide=_INTERPRETATION_GUIDE.strip() if detail_level == "full" else "",
    )


def get_default_inputs() -> dict[str, Any]:
    """Default inputs for every calculator as JSON-serializable dicts."""
    return {
        "loan": LoanInput().model_dump(),
        "financing": FinancingRequest().model_dump(),
        "eligibility": EligibilityInput().model_dump(),
        "eligibility_policy": EligibilityPolicy().model_dump(),
    }
