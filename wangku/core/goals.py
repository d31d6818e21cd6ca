"""Savings goal projection and on-track status."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Union

from wangku.core.results import ResultModel

logger = logging.getLogger(__name__)

MONTH = timedelta(days=30)
NOMINAL_WINDOW = timedelta(days=365)
LATEST_DATE = datetime.max.replace(tzinfo=timezone.utc)

# thresholds in tenths of the expected pace
AHEAD_TENTHS = 11
BEHIND_TENTHS = 9

DateLike = Union[str, date, datetime]


class GoalStatus(str, Enum):
    AHEAD = "ahead"
    ON_TRACK = "on-track"
    BEHIND = "behind"


class GoalProjectionResult(ResultModel):
    monthly_needed: float
    projected_completion_date: datetime
    status: GoalStatus
    difference: float
    months_remaining: int
    time_progress: float
    actual_progress: float


def parse_date(value: DateLike, field_name: str = "date") -> datetime:
    """Parse an ISO date or datetime into an aware UTC datetime.

    Date-only strings are taken as midnight UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f"{field_name} is not a valid ISO date: {value!r}") from None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _now(now: Optional[DateLike]) -> datetime:
    return parse_date(now, "now") if now is not None else datetime.now(timezone.utc)


def months_until(target: datetime, now: datetime) -> int:
    return math.ceil((target - now) / MONTH)


def classify_progress(actual_progress: float, time_progress: float) -> GoalStatus:
    if actual_progress * 10 >= time_progress * AHEAD_TENTHS:
        return GoalStatus.AHEAD
    if actual_progress * 10 < time_progress * BEHIND_TENTHS:
        return GoalStatus.BEHIND
    return GoalStatus.ON_TRACK


def time_progress(target: datetime, now: datetime, start: Optional[datetime] = None) -> float:
    """Percent of the savings window already elapsed.

    Without a known start the window is the nominal year leading up to the
    target. Can fall below 0 or exceed 100 outside the window.
    """
    start = start if start is not None else target - NOMINAL_WINDOW
    window = target - start
    if window <= timedelta(0):
        return 100.0
    return (now - start) / window * 100


def project_goal(
    current_amount: float,
    target_amount: float,
    target_date: DateLike,
    monthly_contribution: float = 0.0,
    start_date: Optional[DateLike] = None,
    now: Optional[DateLike] = None,
) -> GoalProjectionResult:
    """
    Work out what a goal still needs and whether it is keeping pace.

    Without a contribution the completion estimate is simply twice the time
    remaining; treat it as a nudge, not a forecast.
    """
    now_dt = _now(now)
    target = parse_date(target_date, "target date")
    start = parse_date(start_date, "start date") if start_date is not None else None

    months_remaining = max(1, months_until(target, now_dt))
    remaining = target_amount - current_amount
    monthly_needed = max(0.0, remaining / months_remaining)

    if monthly_contribution > 0:
        months_to_finish = max(0.0, remaining / monthly_contribution)
    else:
        months_to_finish = months_remaining * 2
    # far-off estimates stop at the last representable date
    projected_months = math.ceil(min(months_to_finish, (LATEST_DATE - now_dt) // MONTH))
    projected_date = now_dt + projected_months * MONTH

    elapsed = time_progress(target, now_dt, start)
    actual = (current_amount / target_amount) * 100 if target_amount > 0 else 0.0
    status = classify_progress(actual, elapsed)

    logger.debug(
        "Goal %.2f/%.2f: time %.1f%% actual %.1f%% -> %s",
        current_amount,
        target_amount,
        elapsed,
        actual,
        status.value,
    )

    return GoalProjectionResult(
        monthly_needed=monthly_needed,
        projected_completion_date=projected_date,
        status=status,
        difference=current_amount - target_amount * (elapsed / 100),
        months_remaining=months_remaining,
        time_progress=elapsed,
        actual_progress=actual,
    )


def calculate_progress(current_amount: float, target_amount: float) -> float:
    """Progress towards a target in percent, capped at 100."""
    if target_amount == 0:
        return 0.0
    return min(current_amount / target_amount * 100, 100.0)


def calculate_months_remaining(target_date: DateLike, now: Optional[DateLike] = None) -> int:
    return max(months_until(parse_date(target_date, "target date"), _now(now)), 0)


def is_goal_on_track(
    current_amount: float,
    target_amount: float,
    target_date: DateLike,
    start_date: Optional[DateLike] = None,
    now: Optional[DateLike] = None,
) -> bool:
    """True unless the goal would be classified as behind by :func:`project_goal`."""
    if calculate_months_remaining(target_date, now) == 0:
        return current_amount >= target_amount
    if target_amount == 0:
        return False

    projection = project_goal(
        current_amount,
        target_amount,
        target_date,
        start_date=start_date,
        now=now,
    )
    return projection.status is not GoalStatus.BEHIND
