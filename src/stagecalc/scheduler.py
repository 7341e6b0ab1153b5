"""Cascade scheduling of ordered stages over a workday calendar."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from functools import reduce

from .logger import get_logger
from .models import (
    NonWorkingDayRule,
    ScheduleResult,
    ScheduleSummary,
    StageResult,
    StageSpec,
    ThroughputParameters,
    WorkQuantity,
)
from .workdays import next_workday, step_workdays, workdays_needed

logger = get_logger()


@dataclass(frozen=True)
class CascadeState:
    """Accumulator threaded through the stage fold."""

    cursor: date  # Start date for the next non-empty stage
    total_calendar_days: int = 0
    last_end: date | None = None
    results: tuple[StageResult, ...] = ()


class CascadeScheduler:
    """Schedules stages one after another, each starting after the previous ends.

    Stages with no units are skipped without consuming calendar time. The first
    stage starts exactly on the given start date, even when that date is the
    non-working day; later stages start on the next working day after the
    previous stage's end.
    """

    def schedule(
        self,
        stages: Sequence[StageSpec],
        throughput: ThroughputParameters,
        start_date: date,
        non_working_day: NonWorkingDayRule,
        total_units: WorkQuantity | None = None,
    ) -> ScheduleResult:
        """Compute stage dates and the project summary.

        Args:
            stages: Ordered stages, as returned by the allocator
            throughput: Validated rate and team count
            start_date: Start date of the first non-empty stage
            non_working_day: Weekly day excluded from work
            total_units: Raw total to echo in the summary, if positive

        Returns:
            ScheduleResult with a row per non-empty stage
        """
        rate = throughput.combined_daily_rate

        def advance(state: CascadeState, stage: StageSpec) -> CascadeState:
            return self._schedule_stage(state, stage, rate, non_working_day)

        final = reduce(advance, stages, CascadeState(cursor=start_date))

        summary = ScheduleSummary(
            total_units=total_units,
            project_start=start_date,
            total_calendar_duration=final.total_calendar_days,
            project_end=final.last_end,
        )
        if final.last_end is None:
            logger.changes("No stage has units; nothing was scheduled")
        else:
            logger.changes(
                "Project: %s -> %s (%d calendar days)",
                start_date.isoformat(),
                final.last_end.isoformat(),
                final.total_calendar_days,
            )
        return ScheduleResult(results=final.results, summary=summary)

    def _schedule_stage(
        self,
        state: CascadeState,
        stage: StageSpec,
        combined_daily_rate: float,
        rule: NonWorkingDayRule,
    ) -> CascadeState:
        if stage.units <= 0:
            logger.checks("Skipping %s: no units", stage.name)
            return state

        required = workdays_needed(stage.units, combined_daily_rate)
        logger.debug(
            "%s: %s units at %s/day -> %d workdays from %s",
            stage.name,
            stage.units,
            combined_daily_rate,
            required,
            state.cursor.isoformat(),
        )
        end, duration = step_workdays(state.cursor, required, rule)

        result = StageResult(
            name=stage.name,
            units=stage.units,
            start_date=state.cursor,
            end_date=end,
            calendar_duration=duration,
        )
        logger.changes(
            "%s: %s -> %s (%d days)",
            stage.name,
            result.start_date.isoformat(),
            result.end_date.isoformat(),
            duration,
        )

        return CascadeState(
            cursor=next_workday(end, rule),
            total_calendar_days=state.total_calendar_days + duration,
            last_end=end,
            results=(*state.results, result),
        )
