"""
Closed-form corporate finance formulas.

Design:
- NPV/IRR implementations live only in corpfin.finance.irr (singleton).
- This module must not *define* irr/npv (no 'def irr' / 'def npv' here);
  it re-exports them so callers get the whole formula set from one place.
- Rates are percentages (7.5 = 7.5%). Results are rounded the way each
  formula documents; lr and r72 are not rounded.
"""
from __future__ import annotations

from typing import List, Sequence

from corpfin.validate import require_cashflows
from .irr import irr as irr, npv as npv  # re-exports only
from .utils import as_cashflows, ceil_to, discounted, round_to


def am(
    principal: float,
    rate: float,
    period: float,
    in_months: bool = False,
    pay_at_beginning: bool = False,
) -> float:
    """
    Amortized loan payment per month.

    `rate` is the annual rate; `period` is in years unless `in_months`.
    With `pay_at_beginning` the first period accrues no interest: the
    numerator is r(1+r)^(n-1), not the bare count n-1, so the payment is
    the arrears payment divided by (1+r).
    """
    r = rate / 12.0 / 100.0
    n = period if in_months else period * 12.0
    accruals = n - 1.0 if pay_at_beginning else n
    numerator = r * (1.0 + r) ** accruals
    denominator = (1.0 + r) ** n - 1.0
    return round_to(principal * (numerator / denominator), 2)


def cagr(begin_value: float, end_value: float, num_periods: float) -> float:
    """Compound annual growth rate, in percent."""
    growth = (end_value / begin_value) ** (1.0 / num_periods) - 1.0
    return round_to(growth * 10000.0, 0) / 100.0


def ci(rate: float, num_compoundings: float, principal: float, num_periods: float) -> float:
    """Principal plus compound interest after `num_periods`."""
    per_compounding = (rate / 100.0) / num_compoundings
    return round_to(principal * (1.0 + per_compounding) ** (num_compoundings * num_periods), 2)


def df(rate: float, num_periods: int) -> List[float]:
    """
    Discount factors for periods 0..num_periods-2, each rounded UP to 3 dp.
    df(10, 6) == [1.0, 0.91, 0.827, 0.752, 0.684]
    """
    base = 1.0 + rate / 100.0
    return [ceil_to(1.0 / base ** (i - 1), 3) for i in range(1, int(num_periods))]


def fv(rate: float, cf0: float, num_periods: float) -> float:
    """Future value of `cf0` after `num_periods` at `rate` per period."""
    return round_to(cf0 * (1.0 + rate / 100.0) ** num_periods, 2)


def pp(num_periods: float, cashflows: Sequence[float]) -> float:
    """
    Payback period, in periods.

    num_periods == 0 is the even-cash-flow shortcut |CF0 / CF1| (unrounded).
    Otherwise cash flows are accumulated until the running total turns
    positive and the last period is interpolated.
    """
    cfs = as_cashflows(cashflows)
    require_cashflows(cfs, "pp")

    if num_periods == 0:
        return abs(cfs[0] / cfs[1])

    years = 1.0
    cumulative = cfs[0]
    for v in cfs[1:]:
        cumulative += v
        if cumulative > 0:
            years += (cumulative - v) / v
            return round_to(years, 2)
        years += 1.0
    return round_to(years, 2)


def pv(rate: float, cf1: float) -> float:
    """Present value of a cash flow one period out, rounded to whole units."""
    return round_to(cf1 / (1.0 + rate / 100.0), 0)


def pi(rate: float, cashflows: Sequence[float]) -> float:
    """Profitability index: PV of CF[1:] over |CF[0]|."""
    cfs = as_cashflows(cashflows)
    require_cashflows(cfs, "pi")

    base = 1.0 + rate / 100.0
    total = 0.0
    for t, v in enumerate(cfs[1:], start=1):
        total += v * discounted(1.0, base, t)
    return round_to(total / abs(cfs[0]), 2)


def roi(cf0: float, earnings: float) -> float:
    """Return on investment, in percent."""
    invested = abs(cf0)
    return round_to((earnings - invested) / invested * 100.0, 2)


def lr(total_liabilities: float, total_debts: float, total_income: float) -> float:
    """Leverage ratio."""
    return (total_liabilities + total_debts) / total_income


def r72(rate: float) -> float:
    """Rule of 72: periods needed to double at `rate` percent."""
    return 72.0 / rate


def wacc(
    equity_value: float,
    debt_value: float,
    equity_cost: float,
    debt_cost: float,
    tax_rate: float,
) -> float:
    """After-tax weighted average cost of capital, in percent, 1 dp."""
    total = equity_value + debt_value
    equity_part = (equity_value / total) * equity_cost / 100.0
    debt_part = ((debt_value / total) * debt_cost / 100.0) * (1.0 - tax_rate / 100.0)
    return round_to((equity_part + debt_part) * 1000.0, 0) / 10.0


__all__ = [
    "am", "cagr", "ci", "df", "fv", "irr", "npv",
    "pp", "pv", "pi", "roi", "lr", "r72", "wacc",
]
