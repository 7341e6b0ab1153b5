"""Core records for stage allocation and cascade scheduling."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

# Raw form values: missing, blank text, numbers or numeric text
RawQuantity = str | int | float | None
WorkQuantity = int | float


class Weekday(str, Enum):
    """Days of the week, named as they appear in configuration files."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def number(self) -> int:
        """Index matching date.weekday() (Monday=0 ... Sunday=6)."""
        return list(Weekday).index(self)

    @classmethod
    def from_date(cls, day: date) -> Weekday:
        """Weekday of a calendar date."""
        return list(cls)[day.weekday()]


@dataclass(frozen=True)
class NonWorkingDayRule:
    """The single weekday that never counts as a workday.

    Defaults to Friday, the sixth day of a Sunday-first week.
    """

    weekday: Weekday = Weekday.FRIDAY

    def is_working_day(self, day: date) -> bool:
        return day.weekday() != self.weekday.number


@dataclass(frozen=True)
class ThroughputParameters:
    """Validated work rate of the installation crews."""

    rate_per_team_per_day: float
    team_count: int

    @property
    def combined_daily_rate(self) -> float:
        return self.rate_per_team_per_day * self.team_count


@dataclass(frozen=True)
class StageSpec:
    """An ordered stage and the units of work allocated to it."""

    name: str
    units: WorkQuantity


@dataclass(frozen=True)
class ScheduleInput:
    """Raw calculator input as a form would supply it.

    Values are validated and parsed by the allocator, so numbers may arrive as
    text and any field may be blank.
    """

    rate_per_team_per_day: RawQuantity
    team_count: RawQuantity
    start_date: str | date | None
    total_units: RawQuantity = None
    per_stage_units: Sequence[RawQuantity] = ()
    non_working_day: NonWorkingDayRule = field(default_factory=NonWorkingDayRule)


@dataclass(frozen=True)
class StageResult:
    """Computed dates for one non-empty stage."""

    name: str
    units: WorkQuantity
    start_date: date
    end_date: date
    calendar_duration: int  # Calendar days from start through end, inclusive


@dataclass(frozen=True)
class ScheduleSummary:
    """Aggregate view of the whole schedule."""

    total_units: WorkQuantity | None  # Echoed only when the raw total was positive
    project_start: date  # The input start date, never adjusted
    total_calendar_duration: int
    project_end: date | None  # None when no stage produced a result


@dataclass(frozen=True)
class ScheduleResult:
    """Stage rows plus summary returned to callers."""

    results: tuple[StageResult, ...]
    summary: ScheduleSummary

    @property
    def is_empty(self) -> bool:
        return not self.results
