"""Financing — down payment, EMI and totals as shown on the EMI calculators.

  down_payment   = min(round(car_price × down_payment_pct / 100), car_price)
  principal      = car_price − down_payment
  total_paid     = EMI × tenure + down_payment
  total_interest = total_paid − car_price
"""

from __future__ import annotations

import logging
from typing import Iterable, Literal

from autovinci_pricing.config.banks import DEFAULT_BANK_OFFERS, LENDER_DIRECTORY, BankOffer, LenderProfile, LenderType
from autovinci_pricing.config.loan import FinancingRequest
from autovinci_pricing.config.quote import OnRoadQuoteRequest
from autovinci_pricing.engine.amortization import monthly_installment
from autovinci_pricing.engine.price_breakdown import build_on_road_breakdown
from autovinci_pricing.formatting import format_inr
from autovinci_pricing.models.results import BankEmiQuote, FinancingPlan, LenderListing, OnRoadQuote
from autovinci_pricing.utils import round_half_up

logger = logging.getLogger(__name__)


def plan_financing(req: FinancingRequest) -> FinancingPlan:
    """Compute the full EMI calculator read-out for one set of inputs."""
    # Rounding up a near-100% down payment must not push it past the price.
    down_payment = min(round_half_up(req.car_price * req.down_payment_pct / 100), req.car_price)
    principal = req.car_price - down_payment
    emi = monthly_installment(principal, req.annual_rate_percent, req.tenure_months)

    repayments = emi * req.tenure_months
    total_paid = repayments + down_payment
    total_interest = total_paid - req.car_price

    # Donut split covers the loan repayments only, not the down payment.
    if repayments > 0:
        principal_share = min(round_half_up(principal / repayments * 100), 100)
        interest_share = 100 - principal_share
    else:
        principal_share = 0
        interest_share = 0

    return FinancingPlan(
        car_price=req.car_price,
        down_payment=down_payment,
        principal=principal,
        tenure_months=req.tenure_months,
        annual_rate_percent=req.annual_rate_percent,
        monthly_installment=emi,
        total_paid=total_paid,
        total_interest=total_interest,
        principal_share_pct=principal_share,
        interest_share_pct=interest_share,
        interest_pct_of_price=round(total_interest / req.car_price * 100, 1),
        monthly_installment_display=format_inr(emi, symbol=True),
        total_paid_display=format_inr(total_paid, symbol=True),
        total_interest_display=format_inr(max(total_interest, 0), symbol=True),
    )


def quote_on_road(req: OnRoadQuoteRequest) -> OnRoadQuote:
    """On-road breakdown, then financing of the chosen basis."""
    breakdown = build_on_road_breakdown(req.ex_showroom_price, req.rules, req.city)
    basis = breakdown.total if req.finance_basis == "on_road" else breakdown.ex_showroom_price

    financing = plan_financing(FinancingRequest(
        car_price=basis,
        down_payment_pct=req.down_payment_pct,
        tenure_months=req.tenure_months,
        annual_rate_percent=req.annual_rate_percent,
    ))

    return OnRoadQuote(
        breakdown=breakdown,
        finance_basis=req.finance_basis,
        financing=financing,
        total_display=format_inr(breakdown.total, symbol=True),
        line_item_displays={
            item.label: format_inr(item.amount, symbol=True) for item in breakdown.line_items
        },
    )


def compare_bank_offers(
    principal: float,
    tenure_months: int,
    offers: Iterable[BankOffer] | None = None,
) -> list[BankEmiQuote]:
    """EMI for the same loan at each lender's rate, cheapest first.

    Ties keep rate-card order (``sorted`` is stable).
    """
    if offers is None:
        offers = DEFAULT_BANK_OFFERS

    quotes: list[BankEmiQuote] = []
    for offer in offers:
        emi = monthly_installment(principal, offer.annual_rate_percent, tenure_months)
        quotes.append(BankEmiQuote(
            bank=offer.bank,
            annual_rate_percent=offer.annual_rate_percent,
            monthly_installment=emi,
            total_interest=round_half_up(emi * tenure_months - principal),
        ))
    quotes.sort(key=lambda q: q.monthly_installment)
    logger.debug("Compared %d bank offers for principal=%.2f", len(quotes), principal)
    return quotes


def list_lenders(
    lender_type: LenderType | None = None,
    sort_by: Literal["rate", "max_amount"] = "rate",
    lenders: Iterable[LenderProfile] | None = None,
) -> list[LenderListing]:
    """Lender directory, optionally narrowed to one category.

    ``sort_by="rate"`` lists the lowest rate first; ``"max_amount"`` lists the
    largest loan ceiling first. Ties keep directory order.
    """
    if lenders is None:
        lenders = LENDER_DIRECTORY

    selected = [lender for lender in lenders if lender_type is None or lender.lender_type == lender_type]
    if sort_by == "rate":
        selected.sort(key=lambda lender: lender.annual_rate_percent)
    else:
        selected.sort(key=lambda lender: -lender.max_amount)

    return [
        LenderListing(
            bank=lender.bank,
            lender_type=lender.lender_type,
            annual_rate_percent=lender.annual_rate_percent,
            max_tenure_months=lender.max_tenure_months,
            max_amount=lender.max_amount,
            max_amount_display=format_inr(lender.max_amount, symbol=True),
            processing_fee_pct=lender.processing_fee_pct,
        )
        for lender in selected
    ]


def starting_emi(
    price: float,
    down_payment_pct: float = 20.0,
    annual_rate_percent: float = 9.0,
    tenure_months: int = 84,
) -> int:
    """Catalogue card "EMI from" figure: 80 % financed at 9 % over 7 years."""
    principal = price * (1 - down_payment_pct / 100)
    return monthly_installment(principal, annual_rate_percent, tenure_months)
