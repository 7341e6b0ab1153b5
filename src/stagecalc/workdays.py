"""Calendar stepping around a weekly non-working day."""

from __future__ import annotations

import math
from datetime import date, timedelta

from .logger import debug_enabled, get_logger
from .models import NonWorkingDayRule, WorkQuantity

logger = get_logger()

ONE_DAY = timedelta(days=1)


def workdays_needed(units: WorkQuantity, combined_daily_rate: float) -> int:
    """Whole workdays required to complete the given units."""
    return math.ceil(units / combined_daily_rate)


def next_workday(day: date, rule: NonWorkingDayRule) -> date:
    """Return the first working day strictly after ``day``."""
    candidate = day + ONE_DAY
    while not rule.is_working_day(candidate):
        candidate += ONE_DAY
    return candidate


def step_workdays(start: date, required: int, rule: NonWorkingDayRule) -> tuple[date, int]:
    """Walk forward from ``start`` until ``required`` workdays are satisfied.

    The start day itself is the first day visited. Every visited day counts
    toward the calendar duration whether or not it is a workday; the end date
    stays on the day that satisfied the last required workday. If that day is
    the non-working day the walk continues until it is not.

    Args:
        start: First day of the stage
        required: Number of workdays to satisfy (at least 1)
        rule: Weekly non-working day

    Returns:
        Tuple of (end_date, calendar_duration)
    """
    end = start
    satisfied = 0
    calendar_days = 0
    trace = debug_enabled()

    while satisfied < required:
        if rule.is_working_day(end):
            satisfied += 1
        elif trace:
            logger.debug("  %s is a non-working day, not counted", end.isoformat())
        if satisfied < required:
            end += ONE_DAY
        calendar_days += 1

    while not rule.is_working_day(end):
        if trace:
            logger.debug("  End %s falls on the non-working day, moving on", end.isoformat())
        end += ONE_DAY
        calendar_days += 1

    return end, calendar_days
