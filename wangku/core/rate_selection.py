"""Pick one effective annual rate out of a historical rate table."""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Union


class RateMethod(str, Enum):
    LATEST = "latest"
    THREE_YEAR_AVERAGE = "3-year-average"
    FIVE_YEAR_AVERAGE = "5-year-average"
    HISTORICAL_AVERAGE = "historical-average"


_TRAILING_YEARS = {
    RateMethod.THREE_YEAR_AVERAGE: 3,
    RateMethod.FIVE_YEAR_AVERAGE: 5,
}


def select_rate(table: Mapping[int, float], method: Union[RateMethod, str] = RateMethod.LATEST) -> float:
    """
    Return the annual rate (in percent) chosen by ``method``.

      - latest: the rate of the most recent year in the table
      - 3-/5-year-average: mean of the N most recent years (fewer if the table is shorter)
      - historical-average: mean over every year present

    An empty table yields 0.0 so downstream compounding simply shows no growth.
    """
    method = RateMethod(method)
    if not table:
        return 0.0

    years = sorted(table)
    if method is RateMethod.LATEST:
        return float(table[years[-1]])

    if method is RateMethod.HISTORICAL_AVERAGE:
        window = years
    else:
        window = years[-_TRAILING_YEARS[method]:]

    return sum(table[year] for year in window) / len(window)


def average_rate(table: Mapping[int, float]) -> float:
    return select_rate(table, RateMethod.HISTORICAL_AVERAGE)
