from __future__ import annotations

from datetime import datetime, timedelta, timezone
from math import isclose

import pytest

from wangku.core.goals import (
    GoalStatus,
    calculate_months_remaining,
    calculate_progress,
    classify_progress,
    is_goal_on_track,
    parse_date,
    project_goal,
)

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)
HALF_YEAR = timedelta(days=365 / 2)


def test_halfway_through_nominal_year_is_on_track():
    target = NOW + HALF_YEAR
    result = project_goal(22500.0, 45000.0, target.isoformat(), now=NOW)

    assert result.status is GoalStatus.ON_TRACK
    assert isclose(result.time_progress, 50.0)
    assert isclose(result.actual_progress, 50.0)
    assert isclose(result.difference, 0.0, abs_tol=1e-6)


def test_ahead_and_behind_thresholds():
    target = NOW + HALF_YEAR

    assert project_goal(27000.0, 45000.0, target, now=NOW).status is GoalStatus.AHEAD
    assert project_goal(20000.0, 45000.0, target, now=NOW).status is GoalStatus.BEHIND


def test_monthly_needed_and_months_remaining():
    target = NOW + timedelta(days=300)
    result = project_goal(1000.0, 11000.0, target, now=NOW)

    assert result.months_remaining == 10
    assert isclose(result.monthly_needed, 1000.0)


def test_months_remaining_floors_at_one():
    past_target = NOW - timedelta(days=90)
    result = project_goal(0.0, 1200.0, past_target, now=NOW)

    assert result.months_remaining == 1
    assert isclose(result.monthly_needed, 1200.0)


def test_monthly_needed_never_negative():
    result = project_goal(5000.0, 4000.0, NOW + timedelta(days=200), now=NOW)

    assert result.monthly_needed == 0.0


def test_completion_date_with_contribution():
    result = project_goal(0.0, 1000.0, NOW + timedelta(days=365), monthly_contribution=300.0, now=NOW)

    # ceil(1000 / 300) = 4 months of 30 days
    assert result.projected_completion_date == NOW + timedelta(days=120)


def test_completion_date_without_contribution_doubles_remaining_time():
    result = project_goal(0.0, 1000.0, NOW + timedelta(days=90), now=NOW)

    assert result.months_remaining == 3
    assert result.projected_completion_date == NOW + timedelta(days=180)


def test_status_boundaries_are_inclusive_of_ahead():
    # exactly 110% and 90% of the time progress
    assert classify_progress(55.0, 50.0) is GoalStatus.AHEAD
    assert classify_progress(45.0, 50.0) is GoalStatus.ON_TRACK
    assert classify_progress(44.9, 50.0) is GoalStatus.BEHIND


def test_completion_date_beyond_calendar_is_capped():
    result = project_goal(0.0, 1_000_000.0, "2027-01-01", monthly_contribution=10.0, now=NOW)

    assert result.projected_completion_date.year == 9999
    assert result.projected_completion_date > NOW


def test_explicit_start_date_changes_the_window():
    target = NOW + timedelta(days=300)
    start = NOW - timedelta(days=300)

    # halfway through a 600-day window with half the money saved
    result = project_goal(500.0, 1000.0, target, start_date=start, now=NOW)
    assert isclose(result.time_progress, 50.0)
    assert result.status is GoalStatus.ON_TRACK

    # the nominal one-year window would call the same goal ahead
    assert project_goal(500.0, 1000.0, target, now=NOW).status is GoalStatus.AHEAD


def test_zero_target_does_not_divide_by_zero():
    result = project_goal(100.0, 0.0, NOW + HALF_YEAR, now=NOW)

    assert result.actual_progress == 0.0
    assert result.status is GoalStatus.BEHIND


def test_malformed_date_raises():
    with pytest.raises(ValueError, match="target date"):
        project_goal(0.0, 100.0, "next tuesday", now=NOW)


def test_parse_date_forms():
    assert parse_date("2026-03-01") == datetime(2026, 3, 1, tzinfo=timezone.utc)
    assert parse_date("2026-03-01T08:00:00Z") == datetime(2026, 3, 1, 8, tzinfo=timezone.utc)
    assert parse_date("2026-03-01T16:00:00+08:00") == datetime(2026, 3, 1, 8, tzinfo=timezone.utc)


def test_calculate_progress():
    assert calculate_progress(250.0, 1000.0) == 25.0
    assert calculate_progress(1500.0, 1000.0) == 100.0
    assert calculate_progress(10.0, 0.0) == 0.0


def test_calculate_months_remaining_floors_at_zero():
    assert calculate_months_remaining(NOW - timedelta(days=40), now=NOW) == 0
    assert calculate_months_remaining(NOW + timedelta(days=31), now=NOW) == 2


def test_is_goal_on_track_matches_projection_status():
    target = NOW + HALF_YEAR

    assert is_goal_on_track(22500.0, 45000.0, target, now=NOW)
    assert is_goal_on_track(30000.0, 45000.0, target, now=NOW)
    assert not is_goal_on_track(10000.0, 45000.0, target, now=NOW)


def test_is_goal_on_track_edge_cases():
    assert not is_goal_on_track(100.0, 0.0, NOW + HALF_YEAR, now=NOW)
    # deadline passed: only a completed goal counts
    assert is_goal_on_track(1000.0, 1000.0, NOW - timedelta(days=10), now=NOW)
    assert not is_goal_on_track(999.0, 1000.0, NOW - timedelta(days=10), now=NOW)
