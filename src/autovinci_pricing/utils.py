"""Small numeric helpers shared by the calculators."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest whole rupee, halves rounding up.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``);
    rupee figures shown to buyers must round ``.5`` upward instead.

    Examples:
        round_half_up(17641.5) → 17642
        round_half_up(10000.49) → 10000
    """
    return int(math.floor(value + 0.5))
