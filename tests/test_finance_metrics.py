"""
Closed-form formulas in corpfin.finance.metrics.

Reference values are the published worked examples for each formula; they
must reproduce exactly, including the rounding rule of each function.
"""

import pytest

from corpfin.errors import InsufficientCashFlows
from corpfin.finance import metrics as m


def test_am_monthly_payment_over_years():
    assert m.am(20000, 7.5, 5, False, False) == 400.76


def test_am_period_in_months_matches_years():
    assert m.am(20000, 7.5, 60, in_months=True) == m.am(20000, 7.5, 5)


def test_am_paying_at_beginning_is_cheaper():
    arrears = m.am(20000, 7.5, 5)
    advance = m.am(20000, 7.5, 5, pay_at_beginning=True)
    assert advance < arrears
    # one period less of interest accrual
    assert advance == pytest.approx(arrears / (1 + 7.5 / 1200), abs=0.01)


def test_cagr():
    assert m.cagr(10000, 19500, 3) == 24.93


def test_ci():
    assert m.ci(4.3, 4, 1500, 6) == 1938.84


def test_df_reference_and_shape():
    factors = m.df(10, 6)
    assert factors == [1.0, 0.91, 0.827, 0.752, 0.684]
    assert len(factors) == 5
    assert all(a >= b for a, b in zip(factors, factors[1:]))


def test_df_short_horizons_are_empty_or_unit():
    assert m.df(10, 1) == []
    assert m.df(10, 0) == []
    assert m.df(10, 2) == [1.0]


def test_df_rounds_up():
    # 1/1.05 = 0.95238..., ceiling at 3 dp
    assert m.df(5, 3) == [1.0, 0.953]


def test_fv():
    assert m.fv(0.5, 1000, 12) == 1061.68


def test_pp_zero_period_shortcut_is_exact():
    assert m.pp(0, [-105, 25]) == 4.2
    assert m.pp(0, [-100, 30]) == abs(-100 / 30)


def test_pp_cumulative_walk():
    assert m.pp(5, [-50, 10, 13, 16, 19, 22]) == 3.42


def test_pp_never_recovered_counts_all_periods():
    assert m.pp(3, [-100, 10, 10, 10]) == 4.0


@pytest.mark.parametrize("fn", [m.pp, m.pi])
def test_short_series_rejected(fn):
    with pytest.raises(InsufficientCashFlows) as ei:
        fn(0, [-100])
    assert ei.value.minimum == 2
    assert ei.value.got == 1
    # also a ValueError for callers that do not know the typed error
    with pytest.raises(ValueError):
        fn(0, [])


def test_pv_rounds_to_whole_units():
    assert m.pv(10, 1100) == 1000.0
    assert m.pv(7, 100) == 93.0


def test_pv_inverts_single_period_fv():
    for rate, x in ((5.0, 1000.0), (12.5, 73410.0), (0.25, 19.0)):
        assert m.pv(rate, m.fv(rate, x, 1)) == pytest.approx(x, abs=1.0)


def test_pi():
    assert m.pi(10, [-40000, 18000, 12000, 10000, 9000, 6000]) == 1.09


def test_roi():
    assert m.roi(-55000, 60000) == 9.09


def test_lr():
    assert m.lr(25, 10, 20) == 1.75


def test_r72():
    assert m.r72(10) == 7.2


def test_wacc():
    assert m.wacc(600000, 400000, 6, 5, 35) == 4.9


def test_facade_reexports_npv_irr():
    from corpfin.finance import irr as irr_mod

    assert m.npv is irr_mod.npv
    assert m.irr is irr_mod.irr
    assert m.npv(10, [-500000, 200000, 300000, 200000]) == 80015.03
    assert m.irr([-500000, 200000, 300000, 200000]) == 18.82


def test_pi_long_series_at_high_rate():
    # 11**t leaves float range near t=296; those periods add nothing
    assert m.pi(1000, [-1.0] + [1.0] * 400) == 0.1
