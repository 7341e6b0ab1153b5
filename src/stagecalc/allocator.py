"""Input validation and partitioning of work into ordered stages."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import date, datetime

from .exceptions import InsufficientInputError, InvalidInputError
from .logger import get_logger
from .models import RawQuantity, ScheduleInput, StageSpec, ThroughputParameters, WorkQuantity
from .workdays import workdays_needed

logger = get_logger()

DEFAULT_STAGE_NAMES = ("Stage 1", "Stage 2", "Stage 3", "Stage 4")

# Off-day steps a stage can add: a non-working start, end adjustment, next-start skip
MAX_OFF_DAY_STEPS = 4


def _normalize(value: float) -> WorkQuantity:
    return int(value) if value.is_integer() else value


def is_blank(value: RawQuantity) -> bool:
    """Check whether a raw form value was left empty.

    Only None and the empty string count; whitespace is a supplied (zero) value.
    """
    return value is None or value == ""


def parse_quantity(value: RawQuantity) -> WorkQuantity | None:
    """Parse a raw form value into a finite number.

    Returns None for blank, unparseable or non-finite values. Integral values
    come back as int.
    """
    if is_blank(value) or isinstance(value, bool):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return _normalize(number)


def parse_start_date(value: str | date | None) -> date | None:
    """Parse an ISO start date; None when missing or malformed."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (ValueError, AttributeError):
        return None


def parse_positive_total(value: RawQuantity) -> WorkQuantity | None:
    """Return the total units if they parse to a positive number."""
    total = parse_quantity(value)
    if total is None or total <= 0:
        return None
    return total


def validate_throughput(schedule_input: ScheduleInput) -> tuple[ThroughputParameters, date]:
    """Validate the rate, team count and start date together.

    Raises:
        InvalidInputError: Naming every offending field
    """
    invalid: list[str] = []

    rate = parse_quantity(schedule_input.rate_per_team_per_day)
    if rate is None or rate <= 0:
        invalid.append("rate_per_team_per_day")

    teams = parse_quantity(schedule_input.team_count)
    if teams is None or teams <= 0 or not isinstance(teams, int):
        invalid.append("team_count")

    start = parse_start_date(schedule_input.start_date)
    if start is None:
        invalid.append("start_date")

    if invalid:
        raise InvalidInputError(invalid)

    assert rate is not None and isinstance(teams, int) and start is not None
    return ThroughputParameters(rate_per_team_per_day=float(rate), team_count=teams), start


def check_workload_bounds(
    stages: Sequence[StageSpec],
    throughput: ThroughputParameters,
    start_date: date,
    max_stage_workdays: int,
) -> None:
    """Reject workloads the scheduler could not place on the calendar.

    Each stage must fit under the configured workday ceiling, and the whole
    cascade must end before date.max. The calendar span of a stage is bounded
    by its workdays times 7/6, plus the off-day steps at either end.

    Raises:
        InvalidInputError: If a stage is too long or the schedule runs past date.max
    """
    span_bound = 0
    for stage in stages:
        if stage.units <= 0:
            continue
        needed = workdays_needed(stage.units, throughput.combined_daily_rate)
        if needed > max_stage_workdays:
            raise InvalidInputError(
                ["units"],
                f"{stage.name} needs {needed} workdays, more than the limit of "
                f"{max_stage_workdays}",
            )
        span_bound += math.ceil(needed * 7 / 6) + MAX_OFF_DAY_STEPS

    if start_date.toordinal() + span_bound > date.max.toordinal():
        raise InvalidInputError(
            ["start_date"], f"a schedule starting {start_date.isoformat()} runs past {date.max}"
        )


class StageAllocator:
    """Turns raw input into an ordered list of stage work quantities.

    Manual per-stage values take precedence over the total. When only the total
    is given it is split evenly and the integer remainder goes to the last stage.
    """

    def __init__(self, stage_names: Sequence[str] = DEFAULT_STAGE_NAMES):
        if not stage_names:
            raise ValueError("At least one stage name is required")
        self.stage_names = tuple(stage_names)

    def allocate(self, schedule_input: ScheduleInput) -> list[StageSpec]:
        """Validate the input and partition the work into stages.

        Raises:
            InvalidInputError: Bad throughput, start date or manual stage values
            InsufficientInputError: No positive total and no per-stage values
        """
        validate_throughput(schedule_input)
        return self.partition(schedule_input)

    def partition(self, schedule_input: ScheduleInput) -> list[StageSpec]:
        """Partition the work of an input whose throughput is already validated.

        Raises:
            InvalidInputError: Negative or surplus manual stage values
            InsufficientInputError: No positive total and no per-stage values
        """
        if self.has_manual_units(schedule_input.per_stage_units):
            return self.allocate_manual(schedule_input.per_stage_units)

        total = parse_positive_total(schedule_input.total_units)
        if total is not None:
            return self.distribute_evenly(total)

        raise InsufficientInputError()

    def has_manual_units(self, per_stage_units: Sequence[RawQuantity]) -> bool:
        return any(not is_blank(value) for value in per_stage_units)

    def allocate_manual(self, per_stage_units: Sequence[RawQuantity]) -> list[StageSpec]:
        """Use the supplied per-stage values; absent or unparseable ones become 0."""
        if len(per_stage_units) > len(self.stage_names):
            raise InvalidInputError(
                ["per_stage_units"],
                f"got {len(per_stage_units)} values for {len(self.stage_names)} stages",
            )

        logger.checks("Using manual per-stage units")
        stages: list[StageSpec] = []
        for index, name in enumerate(self.stage_names):
            raw = per_stage_units[index] if index < len(per_stage_units) else None
            units = parse_quantity(raw)
            if units is None:
                units = 0
            elif units < 0:
                raise InvalidInputError(["per_stage_units"], f"{name} has negative units")
            stages.append(StageSpec(name=name, units=units))
        return stages

    def distribute_evenly(self, total: WorkQuantity) -> list[StageSpec]:
        """Split the total evenly, placing the whole remainder on the last stage."""
        count = len(self.stage_names)
        per_stage = math.floor(total / count)
        remainder = _normalize(float(total % count))

        logger.checks(
            "Distributing %s units over %d stages (%d each, remainder %s)",
            total,
            count,
            per_stage,
            remainder,
        )
        stages = [StageSpec(name=name, units=per_stage) for name in self.stage_names[:-1]]
        stages.append(StageSpec(name=self.stage_names[-1], units=per_stage + remainder))
        return stages
