# corpfin/analysis.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import numpy as np
import pandas as pd

from corpfin.config import Settings
from corpfin.errors import SearchBudgetExceeded
from corpfin.finance.metrics import irr, npv, pi, pp
from corpfin.finance.utils import as_cashflows

logger = logging.getLogger(__name__)


# ------------------------------
# Small helpers (no policy here)
# ------------------------------
def _irr_or_none(cfs: List[float], settings: Optional[Settings]) -> Optional[float]:
    """IRR, or None when the search gives up. Non-convergence is not retried."""
    try:
        return irr(cfs, settings=settings)
    except SearchBudgetExceeded as e:
        logger.warning("no IRR for %d-period series: %s", len(cfs), e)
        return None


# ------------------------------
# Public adapter(s)
# ------------------------------
def appraise(
    rate: float,
    cashflows: Iterable[float],
    *,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """
    One-shot project appraisal at a discount `rate` (percent).

    Returns:
      {
        'rate': float,
        'periods': int,               # len(cashflows)
        'npv': float,
        'irr': float | None,          # None if the search budget ran out
        'pi': float | None,           # None for single-element series
        'payback_period': float | None,
      }
    """
    cfs = as_cashflows(cashflows)
    enough = len(cfs) >= 2
    return {
        "rate": float(rate),
        "periods": len(cfs),
        "npv": npv(rate, cfs),
        "irr": _irr_or_none(cfs, settings),
        "pi": pi(rate, cfs) if enough else None,
        "payback_period": pp(len(cfs) - 1, cfs) if enough else None,
    }


def discount_schedule(rate: float, cashflows: Iterable[float]) -> pd.DataFrame:
    """
    Per-period discounting table. Discount factors are exact here (df()
    rounds them up to 3 dp for display).
    """
    cfs = np.asarray(as_cashflows(cashflows), dtype=float)
    periods = np.arange(len(cfs))
    factors = 1.0 / (1.0 + float(rate) / 100.0) ** periods
    present = cfs * factors
    return pd.DataFrame(
        {
            "period": periods,
            "cashflow": cfs,
            "discount_factor": factors,
            "present_value": present,
            "cumulative_cashflow": np.cumsum(cfs),
            "cumulative_present_value": np.cumsum(present),
        }
    )


def npv_profile(
    cashflows: Iterable[float],
    rates: Optional[Iterable[float]] = None,
    *,
    settings: Optional[Settings] = None,
) -> pd.DataFrame:
    """NPV across a grid of rates (default 0..50%); IRR kept in df.attrs['irr']."""
    cfs = as_cashflows(cashflows)
    grid = np.arange(0.0, 51.0, 1.0) if rates is None else np.asarray(list(rates), dtype=float)
    out = pd.DataFrame({"rate": grid, "npv": [npv(float(r), cfs) for r in grid]})
    out.attrs["irr"] = _irr_or_none(cfs, settings)
    return out


__all__ = ["appraise", "discount_schedule", "npv_profile"]
