"""Price breakdown assembler — ex-showroom price plus surcharges → on-road total.

Pure arithmetic: a price and an ordered rule set → ordered line items + total.
Line items keep the order of the rules that produced them.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from pydantic import TypeAdapter, ValidationError

from autovinci_pricing.config.breakdown import LineItem, PriceBreakdownInput
from autovinci_pricing.config.surcharges import (
    FlatSurcharge,
    PercentSurcharge,
    SurchargeRule,
    TieredSurcharge,
    city_on_road_rules,
    default_on_road_rules,
)
from autovinci_pricing.exceptions import InvalidSurchargeError
from autovinci_pricing.models.results import PriceBreakdownResult
from autovinci_pricing.utils import round_half_up

logger = logging.getLogger(__name__)

_RULES_ADAPTER = TypeAdapter(list[SurchargeRule])


def parse_surcharge_rules(raw: Sequence[dict[str, Any]]) -> list[SurchargeRule]:
    """Build rule objects from JSON-like dicts (``{"kind": "percent", ...}``).

    Raises
    ------
    InvalidSurchargeError
        If any rule is malformed, negative or has unordered brackets.
    """
    try:
        return _RULES_ADAPTER.validate_python(list(raw))
    except ValidationError as exc:
        raise InvalidSurchargeError(f"invalid surcharge rules: {exc.errors(include_url=False)}") from exc


def surcharge_amount(rule: SurchargeRule, ex_showroom_price: float) -> float:
    """Amount one rule adds for a given ex-showroom price."""
    if isinstance(rule, PercentSurcharge):
        return float(round_half_up(ex_showroom_price * rule.percent / 100))
    if isinstance(rule, FlatSurcharge):
        return float(rule.amount)
    if isinstance(rule, TieredSurcharge):
        for bracket in rule.brackets:
            if ex_showroom_price < bracket.below:
                return float(bracket.amount)
        return float(rule.otherwise)
    raise InvalidSurchargeError(f"unknown surcharge rule: {rule!r}")


def resolve_surcharges(ex_showroom_price: float, rules: Iterable[SurchargeRule]) -> list[LineItem]:
    """Evaluate each rule against the price, keeping rule order."""
    return [
        LineItem(label=rule.label, amount=surcharge_amount(rule, ex_showroom_price))
        for rule in rules
    ]


def assemble_price_breakdown(breakdown: PriceBreakdownInput) -> PriceBreakdownResult:
    """Sum ex-showroom price and surcharges into an itemised total.

    total = ex_showroom_price + Σ surcharge amounts
    """
    surcharge_sum = sum(item.amount for item in breakdown.surcharges)
    total = breakdown.ex_showroom_price + surcharge_sum
    return PriceBreakdownResult(
        ex_showroom_price=breakdown.ex_showroom_price,
        line_items=list(breakdown.surcharges),
        total=total,
    )


def build_on_road_breakdown(
    ex_showroom_price: float,
    rules: Sequence[SurchargeRule] | None = None,
    city: str | None = None,
) -> PriceBreakdownResult:
    """On-road price for one variant.

    Parameters
    ----------
    ex_showroom_price : float
        Base price before registration, insurance, tax and handling (₹).
    rules : sequence of SurchargeRule, optional
        Defaults to RTO 10 %, tiered insurance, TCS 1 % and ₹15,000 handling.
    city : str, optional
        When ``rules`` is None, price registration at this city's flat fee
        instead of 10 %. Unknown cities use the Delhi fee.
    """
    if rules is None:
        rules = city_on_road_rules(city) if city else default_on_road_rules()
    surcharges = resolve_surcharges(ex_showroom_price, rules)
    result = assemble_price_breakdown(
        PriceBreakdownInput(ex_showroom_price=ex_showroom_price, surcharges=surcharges)
    )
    logger.debug(
        "On-road total %.2f for ex-showroom %.2f (%d surcharges)",
        result.total, ex_showroom_price, len(surcharges),
    )
    return result
