from __future__ import annotations

from math import isclose

import pytest

from wangku.core.compounding import compound_year, project


def test_single_year_without_contributions():
    """10k at 5.75% for one year compounds exactly once."""
    result = project(10000.0, 0.0, 5.75, 1)

    assert isclose(result.projected_balance, 10575.0, abs_tol=0.01)
    assert isclose(result.total_dividends, 575.0, abs_tol=0.01)
    assert result.total_contributions == 0.0


def test_contribution_lands_before_dividend():
    result = project(0.0, 100.0, 10.0, 1)

    # 1200 contributed, then 10% dividend on it
    assert isclose(result.projected_balance, 1320.0)
    assert isclose(result.yearly_breakdown[0].dividend, 120.0)


def test_zero_horizon_is_identity():
    result = project(2500.0, 300.0, 6.0, 0)

    assert result.projected_balance == 2500.0
    assert result.total_dividends == 0.0
    assert result.total_contributions == 0.0
    assert result.yearly_breakdown == []


def test_negative_horizon_behaves_like_zero():
    result = project(2500.0, 300.0, 6.0, -3)

    assert result.projected_balance == 2500.0
    assert result.yearly_breakdown == []


def test_fractional_horizon_is_rejected():
    with pytest.raises(ValueError):
        project(1000.0, 0.0, 5.0, 2.5)


@pytest.mark.parametrize("rate", [0.0, 4.5, 12.0])
def test_total_contributions_independent_of_rate(rate):
    result = project(1000.0, 250.0, rate, 7)

    assert result.total_contributions == 250.0 * 12 * 7


def test_breakdown_is_chronological_and_sums_dividends():
    result = project(5000.0, 200.0, 5.0, 10)

    assert [entry.year for entry in result.yearly_breakdown] == list(range(1, 11))
    assert isclose(result.total_dividends, sum(entry.dividend for entry in result.yearly_breakdown))
    assert result.yearly_breakdown[-1].balance == result.projected_balance

    balances = [entry.balance for entry in result.yearly_breakdown]
    assert balances == sorted(balances)


def test_balance_never_drops_below_start():
    for years in range(1, 6):
        for contribution in (0.0, 50.0):
            for rate in (0.0, 3.0):
                assert project(800.0, contribution, rate, years).projected_balance >= 800.0


def test_zero_rate_accumulates_contributions_only():
    result = project(1000.0, 100.0, 0.0, 3)

    assert isclose(result.projected_balance, 1000.0 + 3600.0)
    assert result.total_dividends == 0.0


def test_compound_year_step():
    balance, dividend = compound_year(1000.0, 0.0, 5.0)

    assert isclose(balance, 1050.0)
    assert isclose(dividend, 50.0)
