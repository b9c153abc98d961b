"""Decimal rounding that matches the dashboard's fixed-point formatting."""

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 2) -> float:
    """Round to ``digits`` decimals, ties away from zero.

    Rounds the exact binary value of ``value`` (so ``1.005`` stays ``1.0``
    while ``0.125`` becomes ``0.13``), unlike the banker's rounding of the
    builtin ``round``.

    Args:
        value: Number to round
        digits: Decimal places to keep (>= 0)

    Returns:
        Rounded float. NaN, infinities and magnitudes past the float
        precision limit are returned unchanged.
    """
    value = float(value)
    if not math.isfinite(value) or abs(value) >= 1e15:
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def rounded_ratio(numerator: float, denominator: float, digits: int = 2) -> float:
    """``numerator / denominator`` rounded half up.

    A zero denominator gives ``inf`` (or 0.0 when the numerator is 0 too),
    which falls outside every scoring table.
    """
    if denominator == 0:
        return float("inf") if numerator else 0.0
    return round_half_up(numerator / denominator, digits)
