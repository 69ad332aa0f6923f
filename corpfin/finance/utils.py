"""Rounding and input helpers shared by the finance formulas."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List


def _half_away(value: float) -> float:
    # Decimal(float) is exact, so ties are real ties; HALF_UP rounds them away from zero.
    if not math.isfinite(value):
        return value
    return float(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def round_to(value: float, places: int = 2) -> float:
    """
    Scale by 10**places, round half away from zero, scale back.
    round_to(x, 0) rounds to whole units.
    """
    scale = 10.0 ** places
    return _half_away(value * scale) / scale


def ceil_to(value: float, places: int = 3) -> float:
    """Scale, take the ceiling, scale back (used for discount factors)."""
    scale = 10.0 ** places
    return math.ceil(value * scale) / scale


def discounted(cf: float, base: float, t: int) -> float:
    """cf / base**t with IEEE results where Python float arithmetic would raise."""
    try:
        factor = base ** t
    except OverflowError:
        # |base**t| beyond float range: finite terms vanish, inf/nan give nan
        return cf * 0.0
    if factor == 0.0:
        if cf == 0.0 or math.isnan(cf):
            return math.nan
        return math.copysign(math.inf, cf) * math.copysign(1.0, factor)
    return cf / factor


def as_cashflows(cashflows: Iterable[float]) -> List[float]:
    """Private float copy of a cash-flow series; order is preserved."""
    return [float(x) for x in cashflows]


__all__ = ["round_to", "ceil_to", "discounted", "as_cashflows"]
