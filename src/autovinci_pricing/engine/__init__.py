"""Engine — pure pricing and financing computations."""

from autovinci_pricing.engine.amortization import (
    build_amortization_schedule,
    compute_loan,
    monthly_installment,
    monthly_rate,
)
from autovinci_pricing.engine.price_breakdown import (
    assemble_price_breakdown,
    build_on_road_breakdown,
    parse_surcharge_rules,
    resolve_surcharges,
    surcharge_amount,
)
from autovinci_pricing.engine.financing import (
    compare_bank_offers,
    list_lenders,
    plan_financing,
    quote_on_road,
    starting_emi,
)
from autovinci_pricing.engine.eligibility import check_eligibility

__all__ = [
    "monthly_rate",
    "monthly_installment",
    "compute_loan",
    "build_amortization_schedule",
    "surcharge_amount",
    "resolve_surcharges",
    "assemble_price_breakdown",
    "build_on_road_breakdown",
    "parse_surcharge_rules",
    "plan_financing",
    "quote_on_road",
    "compare_bank_offers",
    "list_lenders",
    "starting_emi",
    "check_eligibility",
]
