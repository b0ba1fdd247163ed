"""FastAPI server — shared pricing calculators for the marketplace pages.

Run with:
    uvicorn autovinci_pricing.api.server:app --reload --port 8000

Or:
    python -m autovinci_pricing.api.server

Endpoints:
    GET  /context          — self-describing manifest (inputs + formulas)
    GET  /defaults         — default inputs for every calculator
    POST /emi              — EMI and totals for one loan
    POST /emi/schedule     — month-by-month amortization schedule
    POST /financing        — EMI calculator read-out (partial request)
    POST /price-breakdown  — itemised on-road price
    POST /on-road          — on-road breakdown + EMI on the financed portion
    GET  /banks            — lender rate card
    GET  /banks/directory  — lender directory (type filter, rate or ceiling sort)
    GET  /cities           — registration fee by city
    POST /banks/compare    — one loan priced at every lender
    POST /eligibility      — indicative loan eligibility
    GET  /format           — Indian-convention rupee formatting
"""

from __future__ import annotations

import logging
import time
from typing import Any, Literal

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from autovinci_pricing import __version__
from autovinci_pricing.api.context import build_context, get_default_inputs
from autovinci_pricing.config import (
    CITY_REGISTRATION_FEES,
    DEFAULT_BANK_OFFERS,
    BankOffer,
    EligibilityInput,
    FinancingRequest,
    LenderType,
    LoanInput,
    OnRoadQuoteRequest,
)
from autovinci_pricing.engine.amortization import build_amortization_schedule, compute_loan
from autovinci_pricing.engine.eligibility import check_eligibility
from autovinci_pricing.engine.financing import compare_bank_offers, list_lenders, plan_financing, quote_on_road
from autovinci_pricing.engine.price_breakdown import build_on_road_breakdown, parse_surcharge_rules
from autovinci_pricing.exceptions import PricingError
from autovinci_pricing.formatting import format_emi_short, format_inr, format_inr_full
from autovinci_pricing.models.results import (
    AmortizationSchedule,
    BankEmiQuote,
    EligibilityResult,
    FinancingPlan,
    LenderListing,
    LoanResult,
    OnRoadQuote,
    PriceBreakdownResult,
)
from autovinci_pricing.observability.logging import log_quote, setup_logging
from autovinci_pricing.settings import settings

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Autovinci Pricing API",
    version=__version__,
    description=(
        "EMI, on-road price and loan tools for the Autovinci car marketplace. "
        "Every page that shows a price or an installment calls these endpoints "
        "instead of re-deriving the formulas. Start with GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Error handling
# ═══════════════════════════════════════════════════════════════════════════

@app.exception_handler(PricingError)
async def pricing_error_handler(request: Request, exc: PricingError) -> JSONResponse:
    """Domain errors are bad input, never server faults."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"error": True, "code": exc.code, "detail": str(exc)},
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Requests assembled from partial overrides are validated inside the handler."""
    logger.warning("Invalid input on %s %s: %d error(s)", request.method, request.url.path, exc.error_count())
    return JSONResponse(
        status_code=422,
        content={"error": True, "code": "validation_error", "detail": exc.errors(include_url=False, include_context=False)},
    )


# ═══════════════════════════════════════════════════════════════════════════
# Request models
# ═══════════════════════════════════════════════════════════════════════════

class PartialRequest(BaseModel):
    """Partial calculator inputs. Missing fields use the service defaults."""
    inputs: dict[str, Any] = Field(
        default_factory=dict,
        description="Example: {'car_price': 1050000, 'annual_rate_percent': 9.5}",
    )


class PriceBreakdownRequest(BaseModel):
    """Request body for /price-breakdown."""
    ex_showroom_price: float = Field(gt=0)
    rules: list[dict[str, Any]] | None = Field(
        default=None,
        description="Surcharge rules; omitted = RTO, insurance, TCS, handling. "
                    "Example: [{'kind': 'percent', 'label': 'RTO', 'percent': 10}]",
    )
    city: str | None = Field(default=None, description="Registration at this city's flat fee; ignored when rules are given")


class BankCompareRequest(BaseModel):
    """Request body for /banks/compare."""
    principal: float = Field(ge=0)
    tenure_months: int = Field(default=60, ge=1, le=360)
    offers: list[BankOffer] | None = Field(default=None, description="Omitted = default rate card")


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _financing_defaults() -> dict[str, Any]:
    return {
        "down_payment_pct": settings.default_down_payment_pct,
        "tenure_months": settings.default_tenure_months,
        "annual_rate_percent": settings.default_rate_percent,
    }


def _build_financing_request(overrides: dict[str, Any]) -> FinancingRequest:
    """FinancingRequest from partial overrides merged onto service defaults."""
    return FinancingRequest(**_deep_merge(_financing_defaults(), overrides))


def _build_on_road_request(overrides: dict[str, Any]) -> OnRoadQuoteRequest:
    """OnRoadQuoteRequest from partial overrides merged onto service defaults."""
    base = _financing_defaults()
    merged = _deep_merge(base, overrides)
    if isinstance(merged.get("rules"), list):
        merged["rules"] = parse_surcharge_rules(merged["rules"])
    return OnRoadQuoteRequest(**merged)


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "Autovinci Pricing API",
        "version": __version__,
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' adds formulas + interpretation guide",
    ),
):
    """Self-describing context manifest. Call this first."""
    return build_context(detail_level)


@app.get("/defaults")
def get_defaults():
    """Default inputs for every calculator."""
    return get_default_inputs()


@app.post("/emi", response_model=LoanResult)
def emi(loan: LoanInput):
    """EMI and totals for one loan."""
    started = time.perf_counter()
    result = compute_loan(loan)
    log_quote("emi", result.monthly_installment, _elapsed_ms(started), term_months=loan.term_months)
    return result


@app.post("/emi/schedule", response_model=AmortizationSchedule)
def emi_schedule(loan: LoanInput):
    """Month-by-month amortization schedule at the rounded EMI."""
    return build_amortization_schedule(loan.principal, loan.annual_rate_percent, loan.term_months)


@app.post("/financing", response_model=FinancingPlan)
def financing(req: PartialRequest):
    """EMI calculator read-out.

    Example minimal request:
    ```json
    {"inputs": {"car_price": 1050000, "down_payment_pct": 20, "tenure_months": 60, "annual_rate_percent": 9.5}}
    ```
    """
    started = time.perf_counter()
    plan = plan_financing(_build_financing_request(req.inputs))
    log_quote("financing", plan.monthly_installment, _elapsed_ms(started), car_price=plan.car_price)
    return plan


@app.post("/price-breakdown", response_model=PriceBreakdownResult)
def price_breakdown(req: PriceBreakdownRequest):
    """Itemised on-road price."""
    rules = parse_surcharge_rules(req.rules) if req.rules is not None else None
    return build_on_road_breakdown(req.ex_showroom_price, rules, req.city)


@app.post("/on-road", response_model=OnRoadQuote)
def on_road(req: PartialRequest):
    """On-road breakdown plus EMI on the financed portion.

    Example minimal request:
    ```json
    {"inputs": {"ex_showroom_price": 1050000, "finance_basis": "ex_showroom"}}
    ```
    """
    started = time.perf_counter()
    quote = quote_on_road(_build_on_road_request(req.inputs))
    log_quote("on_road", quote.breakdown.total, _elapsed_ms(started), finance_basis=quote.finance_basis)
    return quote


@app.get("/banks", response_model=list[BankOffer])
def banks():
    """Default lender rate card."""
    return list(DEFAULT_BANK_OFFERS)


@app.get("/banks/directory", response_model=list[LenderListing])
def banks_directory(
    lender_type: LenderType | None = Query(default=None, description="Public, Private or NBFC; omitted = all"),
    sort_by: Literal["rate", "max_amount"] = Query(default="rate", description="'rate' lowest first, 'max_amount' largest first"),
):
    """Lender directory with limits and processing fees."""
    return list_lenders(lender_type, sort_by)


@app.get("/cities")
def cities():
    """Flat registration fee by city used for city-specific on-road prices."""
    return CITY_REGISTRATION_FEES


@app.post("/banks/compare", response_model=list[BankEmiQuote])
def banks_compare(req: BankCompareRequest):
    """Same loan priced at every lender, cheapest EMI first."""
    return compare_bank_offers(req.principal, req.tenure_months, req.offers)


@app.post("/eligibility", response_model=EligibilityResult)
def eligibility(req: PartialRequest):
    """Indicative loan eligibility."""
    started = time.perf_counter()
    result = check_eligibility(EligibilityInput(**req.inputs))
    log_quote("eligibility", result.eligible_amount, _elapsed_ms(started), employment=req.inputs.get("employment"))
    return result


@app.get("/format")
def format_amount(
    amount: float = Query(..., description="Amount in rupees"),
    symbol: bool = Query(default=False, description="Prefix with ₹"),
):
    """Indian-convention display strings for one amount."""
    return {
        "display": format_inr(amount, symbol=symbol),
        "full": format_inr_full(amount, symbol=symbol),
        "emi_short": format_emi_short(amount),
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    setup_logging(settings.log_level, json_output=settings.log_json)
    uvicorn.run(
        "autovinci_pricing.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
