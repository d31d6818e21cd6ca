"""ASB, EPF and Tabung Haji projections built on the annual compounding loop."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Union

from wangku.core.compounding import (
    ProjectionResult,
    YearBreakdown,
    compound_year,
    project,
)
from wangku.core.epf_contribution import (
    ContributionBreakdown,
    EPFContributionSettings,
    calculate_contribution,
)
from wangku.core.rate_selection import RateMethod, select_rate
from wangku.core.rates import DividendRates, EPFSavingsType
from wangku.core.results import ResultModel

logger = logging.getLogger(__name__)

DEFAULT_RETIREMENT_AGE = 55
DEFAULT_RETIREMENT_BENCHMARK = 500000.0
MAX_PILGRIMAGE_YEARS = 30


class BenchmarkStatus(str, Enum):
    AHEAD = "ahead"
    ON_TRACK = "on-track"
    BEHIND = "behind"


class PilgrimageType(str, Enum):
    HAJJ = "Hajj"
    UMRAH = "Umrah"


# -----------------------------
# ASB
# -----------------------------


class UnitPayout(ResultModel):
    """Per-unit distribution on the units held, in RM."""

    year: int
    dividend: float
    bonus: float
    total: float


class ASBProjection(ProjectionResult):
    rate: float
    rate_year: Optional[int] = None
    estimated_annual_dividend: float
    unit_payout: Optional[UnitPayout] = None


def project_asb(
    rates: DividendRates,
    current_balance: float,
    monthly_contribution: float,
    years: int,
    units_held: float = 0.0,
    year: Optional[int] = None,
) -> ASBProjection:
    """
    Project an ASB balance at a single declared rate.

    The rate is the current-year entry (or ``year`` when given), never an
    average across years.
    """
    if year is not None:
        if year not in rates.asb:
            raise ValueError(f"No declared ASB rate for {year}")
        rate_year: Optional[int] = year
        rate = rates.asb[year]
    else:
        rate_year = max(rates.asb) if rates.asb else None
        rate = select_rate(rates.asb, RateMethod.LATEST)

    result = project(current_balance, monthly_contribution, rate, years)

    unit_payout = None
    detailed = rates.asb_detailed.get(rate_year) if rate_year is not None else None
    if units_held > 0 and detailed is not None:
        # sen per unit -> RM
        unit_payout = UnitPayout(
            year=rate_year,
            dividend=units_held * detailed.dividend / 100,
            bonus=units_held * detailed.bonus / 100,
            total=units_held * detailed.total / 100,
        )

    return ASBProjection(
        **result.model_dump(),
        rate=rate,
        rate_year=rate_year,
        estimated_annual_dividend=current_balance * (rate / 100),
        unit_payout=unit_payout,
    )


# -----------------------------
# EPF
# -----------------------------


class EPFProjection(ProjectionResult):
    rate: float
    savings_type: EPFSavingsType
    rate_method: RateMethod
    years_to_retirement: int
    benchmark: float
    current_benchmark: float
    status: BenchmarkStatus
    additional_needed: float
    contribution: ContributionBreakdown


def benchmark_for_age(rates: DividendRates, age: int) -> float:
    """Recommended balance for the milestone bracket ``age`` falls in."""
    milestones = sorted(rates.epf_benchmarks)
    if not milestones:
        return 0.0
    for milestone in milestones:
        if age <= milestone:
            return rates.epf_benchmarks[milestone]
    return rates.epf_benchmarks[milestones[-1]]


def benchmark_status(balance: float, benchmark: float) -> BenchmarkStatus:
    if balance * 10 >= benchmark * 11:
        return BenchmarkStatus.AHEAD
    if balance * 10 >= benchmark * 9:
        return BenchmarkStatus.ON_TRACK
    return BenchmarkStatus.BEHIND


def project_epf(
    rates: DividendRates,
    current_balance: float,
    current_age: int,
    monthly_salary: float,
    settings: Optional[EPFContributionSettings] = None,
    retirement_age: int = DEFAULT_RETIREMENT_AGE,
    savings_type: Union[EPFSavingsType, str] = EPFSavingsType.CONVENTIONAL,
    rate_method: Union[RateMethod, str] = RateMethod.LATEST,
) -> EPFProjection:
    """
    Project an EPF balance up to retirement.

    The monthly contribution is the ``used_contribution`` of the resolved
    settings, and the status compares today's balance against the benchmark
    for today's age rather than the projected one.
    """
    settings = settings or EPFContributionSettings()
    savings_type = EPFSavingsType(savings_type)
    rate_method = RateMethod(rate_method)

    contribution = calculate_contribution(monthly_salary, settings)
    rate = select_rate(rates.epf_table(savings_type), rate_method)
    years_to_retirement = max(0, retirement_age - current_age)

    result = project(current_balance, contribution.used_contribution, rate, years_to_retirement)

    benchmark = rates.epf_benchmarks.get(retirement_age, DEFAULT_RETIREMENT_BENCHMARK)
    current_benchmark = benchmark_for_age(rates, current_age)

    return EPFProjection(
        **result.model_dump(),
        rate=rate,
        savings_type=savings_type,
        rate_method=rate_method,
        years_to_retirement=years_to_retirement,
        benchmark=benchmark,
        current_benchmark=current_benchmark,
        status=benchmark_status(current_balance, current_benchmark),
        additional_needed=max(0.0, benchmark - result.projected_balance),
        contribution=contribution,
    )


# -----------------------------
# Tabung Haji
# -----------------------------


class TabungHajiProjection(ResultModel):
    years_to_hajj: int
    projected_balance: float
    target_amount: float
    shortfall: float
    rate: float
    yearly_breakdown: List[YearBreakdown] = []


def pilgrimage_target(
    rates: DividendRates,
    pilgrimage_type: Union[PilgrimageType, str] = PilgrimageType.HAJJ,
    people: int = 1,
) -> float:
    per_person = rates.umrah_cost if PilgrimageType(pilgrimage_type) is PilgrimageType.UMRAH else rates.hajj_cost
    return per_person * max(1, people)


def project_tabung_haji(
    rates: DividendRates,
    current_balance: float,
    monthly_contribution: float,
    target_amount: Optional[float] = None,
    pilgrimage_type: Union[PilgrimageType, str] = PilgrimageType.HAJJ,
    people: int = 1,
    rate_method: Union[RateMethod, str] = RateMethod.HISTORICAL_AVERAGE,
) -> TabungHajiProjection:
    """
    Count the years until the balance covers the pilgrimage target, up to 30.

    ``shortfall`` is measured from today's balance, not the projected one.
    """
    target = target_amount if target_amount is not None else pilgrimage_target(rates, pilgrimage_type, people)
    rate = select_rate(rates.tabung_haji, rate_method)

    balance = float(current_balance)
    years = 0
    breakdown: List[YearBreakdown] = []
    while balance < target and years < MAX_PILGRIMAGE_YEARS:
        balance, dividend = compound_year(balance, monthly_contribution, rate)
        years += 1
        breakdown.append(YearBreakdown(year=years, balance=balance, dividend=dividend))

    if balance < target:
        logger.debug("Tabung Haji target %.2f not reached within %s years", target, MAX_PILGRIMAGE_YEARS)

    return TabungHajiProjection(
        years_to_hajj=years if balance >= target else MAX_PILGRIMAGE_YEARS,
        projected_balance=balance,
        target_amount=target,
        shortfall=max(0.0, target - current_balance),
        rate=rate,
        yearly_breakdown=breakdown,
    )
