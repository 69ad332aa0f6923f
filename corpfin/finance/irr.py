# corpfin/finance/irr.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from corpfin.config import DEFAULT_SETTINGS, Settings
from corpfin.errors import SearchBudgetExceeded
from corpfin.finance.utils import as_cashflows, discounted, round_to

logger = logging.getLogger(__name__)

# Search grid: whole-percent ascent, then hundredth-of-a-percent descent.
START_RATE = 1.0
COARSE_STEP = 1.0
FINE_STEP = 0.01
# One coarse step spans this many fine steps; +2 absorbs float drift.
FINE_STEPS_PER_BRACKET = int(round(COARSE_STEP / FINE_STEP)) + 2


# ---------- NPV ----------
def npv(rate: float, cashflows: Iterable[float]) -> float:
    """
    Net present value with `rate` as a per-period percentage (10.0 = 10%):
        NPV = CF[0] + sum_{t=1..N} CF[t] / (1 + rate/100)^t
    CF[0] is never discounted. Rounded to cents.

    Not guarded: rate == -100 gives +/-inf (nan when infinite terms cancel),
    and terms whose discount factor overflows contribute 0.
    """
    r = 1.0 + float(rate) / 100.0
    total = 0.0
    for t, cf in enumerate(cashflows):
        if t == 0:
            total = float(cf)
        else:
            total += discounted(float(cf), r, t)
    return round_to(total, 2)


# ---------- root search ----------
@dataclass
class SearchBudget:
    """Evaluation counter threaded through one root search."""

    limit: int = DEFAULT_SETTINGS.evaluation_limit
    count: int = 0

    def spend(self) -> None:
        self.count += 1
        if self.count > self.limit:
            raise SearchBudgetExceeded(self.count, self.limit)

    @property
    def remaining(self) -> int:
        return max(0, self.limit - self.count)


def seek_zero(
    f: Callable[[float], float],
    budget: Optional[SearchBudget] = None,
) -> float:
    """
    Find x with f(x) ~= 0 for f decreasing in x.

    Walks up from START_RATE in COARSE_STEP increments while f(x) > 0, then
    back down in FINE_STEP decrements while f(x) < 0, and returns where it
    stopped. Resolution is therefore 0.01; no tolerance is involved.

    Every call of f is charged to `budget`. When the ascent moved at least
    once the root is bracketed, so a descent longer than one coarse step
    means f is not monotone and is reported as SearchBudgetExceeded.
    """
    if budget is None:
        budget = SearchBudget()

    def evaluate(x: float) -> float:
        budget.spend()
        return f(x)

    x = START_RATE
    ascended = 0
    while evaluate(x) > 0:
        x = x + COARSE_STEP
        ascended += 1

    descended = 0
    while evaluate(x) < 0:
        x = x - FINE_STEP
        descended += 1
        if ascended and descended > FINE_STEPS_PER_BRACKET:
            raise SearchBudgetExceeded(
                budget.count, budget.limit, "no sign change within one coarse step"
            )

    logger.debug(
        "seek_zero stopped at %r (%d up, %d down, %d evaluations)",
        x, ascended, descended, budget.count,
    )
    return x


# ---------- IRR ----------
def irr(cashflows: Iterable[float], *, settings: Optional[Settings] = None) -> float:
    """
    Internal rate of return as a percentage rounded to 2 dp (18.82 = 18.82%).

    Expects a front-loaded negative series with a single sign change. Raises
    SearchBudgetExceeded once the search has used settings.evaluation_limit
    NPV evaluations; there is no retry.
    """
    cfs = tuple(as_cashflows(cashflows))
    budget = SearchBudget(limit=(settings or DEFAULT_SETTINGS).evaluation_limit)

    def npv_at(rate: float) -> float:
        return npv(rate, cfs)

    rate = round_to(seek_zero(npv_at, budget), 2)
    logger.debug("irr=%s after %d NPV evaluations", rate, budget.count)
    return rate


__all__ = [
    "npv",
    "irr",
    "seek_zero",
    "SearchBudget",
]
