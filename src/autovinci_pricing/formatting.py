"""Rupee display strings in the Indian numbering convention.

    ≥ 1,00,00,000  → "12.35 Cr"
    ≥ 1,00,000     → "10.50 L"
    otherwise      → "99,999"   (lakh grouping: last three digits, then pairs)

All functions are pure and locale-independent: the same input always yields
the same string, whatever the host locale.
"""

from __future__ import annotations

import math
import re

from autovinci_pricing.exceptions import InvalidAmountError
from autovinci_pricing.utils import round_half_up

CRORE = 10_000_000
LAKH = 100_000
RUPEE_SYMBOL = "₹"
INVALID_AMOUNT = "—"

_AMOUNT_RE = re.compile(r"^(?P<number>\d[\d,]*(?:\.\d+)?)\s*(?P<unit>cr|crore|crores|l|lakh|lakhs)?$", re.IGNORECASE)
_UNIT_MULTIPLIERS = {
    "cr": CRORE, "crore": CRORE, "crores": CRORE,
    "l": LAKH, "lakh": LAKH, "lakhs": LAKH,
}


def group_indian_digits(value: int) -> str:
    """Group a non-negative integer as 1,23,45,678 (Indian convention)."""
    digits = str(abs(int(value)))
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs: list[str] = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def _grouped_two_places(value: float) -> str:
    whole, frac = f"{value:.2f}".split(".")
    return f"{group_indian_digits(int(whole))}.{frac}"


def _is_displayable(amount: float) -> bool:
    return not (math.isnan(amount) or math.isinf(amount) or amount < 0)


def format_inr(amount: float, symbol: bool = False) -> str:
    """Format a rupee amount, abbreviating to lakhs / crores when large.

    Returns ``INVALID_AMOUNT`` ("—") for negative, NaN or infinite input.
    """
    if not _is_displayable(amount):
        return INVALID_AMOUNT
    # Thresholds apply to the displayed figure, not the raw value.
    rupees = round_half_up(amount)
    lakhs = f"{amount / LAKH:.2f}"
    if rupees < LAKH:
        body = group_indian_digits(rupees)
    elif float(lakhs) < 100:
        body = f"{lakhs} L"
    else:
        body = f"{_grouped_two_places(amount / CRORE)} Cr"
    return f"{RUPEE_SYMBOL}{body}" if symbol else body


def format_inr_full(amount: float, symbol: bool = False) -> str:
    """Whole rupees with lakh grouping, never abbreviated (e.g. "12,34,567")."""
    if not _is_displayable(amount):
        return INVALID_AMOUNT
    body = group_indian_digits(round_half_up(amount))
    return f"{RUPEE_SYMBOL}{body}" if symbol else body


def format_emi_short(installment: float) -> str:
    """Compact card label for a monthly installment: 17,642 → "₹18k/mo"."""
    if not _is_displayable(installment):
        return INVALID_AMOUNT
    return f"{RUPEE_SYMBOL}{round_half_up(installment / 1000)}k/mo"


def parse_inr(text: str) -> float:
    """Parse a string produced by ``format_inr`` / ``format_inr_full`` back to rupees.

    Accepts an optional ``₹`` / ``Rs`` prefix, lakh or western comma grouping
    and a ``Cr`` / ``L`` suffix. Precision is whatever the string carried:
    "10.50 L" → 1050000.0.

    Raises
    ------
    InvalidAmountError
        If the text is not a rupee amount.
    """
    cleaned = text.strip()
    for prefix in (RUPEE_SYMBOL, "Rs.", "Rs", "INR"):
        if cleaned.startswith(prefix):
            cleaned = cleaned[len(prefix):].strip()
            break

    match = _AMOUNT_RE.match(cleaned)
    if match is None:
        raise InvalidAmountError(f"not a rupee amount: {text!r}")

    number = float(match.group("number").replace(",", ""))
    unit = match.group("unit")
    if unit:
        number *= _UNIT_MULTIPLIERS[unit.lower()]
    return round(number, 2)
