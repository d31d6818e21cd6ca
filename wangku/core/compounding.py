"""Annual compounding used by every dividend-paying instrument."""

from __future__ import annotations

import logging
from typing import List, Tuple

from wangku.core.results import ResultModel

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


class YearBreakdown(ResultModel):
    year: int
    balance: float
    dividend: float


class ProjectionResult(ResultModel):
    projected_balance: float
    total_dividends: float
    total_contributions: float
    yearly_breakdown: List[YearBreakdown] = []


def compound_year(balance: float, monthly_contribution: float, annual_rate_percent: float) -> Tuple[float, float]:
    """
    Advance one year and return ``(new_balance, dividend)``.

    The year's contributions land before the dividend is declared, so new
    money earns a full year of dividend.
    """
    balance += monthly_contribution * MONTHS_PER_YEAR
    dividend = balance * (annual_rate_percent / 100)
    return balance + dividend, dividend


def _whole_years(years: float) -> int:
    if isinstance(years, float):
        if not years.is_integer():
            raise ValueError(f"years must be a whole number, got {years}")
        years = int(years)
    if not isinstance(years, int):
        raise ValueError(f"years must be a whole number, got {years!r}")
    return max(0, years)


def project(
    current_balance: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    years: int,
) -> ProjectionResult:
    """
    Simulate ``years`` whole years of contributions and annual dividends.

    ``years == 0`` leaves the balance untouched with an empty breakdown.
    """
    horizon = _whole_years(years)

    balance = float(current_balance)
    breakdown: List[YearBreakdown] = []
    for year in range(1, horizon + 1):
        balance, dividend = compound_year(balance, monthly_contribution, annual_rate_percent)
        breakdown.append(YearBreakdown(year=year, balance=balance, dividend=dividend))

    logger.debug(
        "Projected %s years at %.2f%%: %.2f -> %.2f",
        horizon,
        annual_rate_percent,
        current_balance,
        balance,
    )

    return ProjectionResult(
        projected_balance=balance,
        total_dividends=sum(entry.dividend for entry in breakdown),
        total_contributions=monthly_contribution * MONTHS_PER_YEAR * horizon,
        yearly_breakdown=breakdown,
    )
