"""High-level entry point: validate, allocate and schedule in one call."""

from __future__ import annotations

from .allocator import (
    StageAllocator,
    check_workload_bounds,
    parse_positive_total,
    validate_throughput,
)
from .config import CalculatorConfig
from .logger import get_logger
from .models import ScheduleInput, ScheduleResult
from .scheduler import CascadeScheduler

logger = get_logger()


def calculate(
    schedule_input: ScheduleInput, config: CalculatorConfig | None = None
) -> ScheduleResult:
    """Compute the stage schedule for a calculator input.

    All validation happens before any date is computed, so a raised error
    means no partial schedule exists.

    Args:
        schedule_input: Raw form values
        config: Stage names and limits (defaults to CalculatorConfig())

    Returns:
        The stage results and project summary

    Raises:
        InvalidInputError: Bad rate, team count, start date or stage values
        InsufficientInputError: Neither a total nor per-stage units supplied
    """
    config = config or CalculatorConfig()

    throughput, start_date = validate_throughput(schedule_input)
    stages = StageAllocator(config.stage_names).partition(schedule_input)
    check_workload_bounds(stages, throughput, start_date, config.max_stage_workdays)

    logger.checks(
        "Scheduling %d stages at %s units/day from %s, %s off",
        len(stages),
        throughput.combined_daily_rate,
        start_date.isoformat(),
        schedule_input.non_working_day.weekday.value,
    )
    return CascadeScheduler().schedule(
        stages,
        throughput,
        start_date,
        schedule_input.non_working_day,
        total_units=parse_positive_total(schedule_input.total_units),
    )
