"""stagecalc - multi-stage workday scheduling for installation projects.

Main entry points:
- calculate: Validate raw input, allocate stages and schedule them
- StageAllocator: Partition work into ordered stages
- CascadeScheduler: Cascade stage dates around a weekly non-working day

Configuration:
- CalculatorConfig / load_config: Stage names, non-working day and limits
"""

from .allocator import DEFAULT_STAGE_NAMES, StageAllocator
from .config import CalculatorConfig, load_config
from .exceptions import (
    ConfigError,
    InsufficientInputError,
    InvalidInputError,
    NoResultsError,
    StagecalcError,
    ValidationError,
)
from .models import (
    NonWorkingDayRule,
    ScheduleInput,
    ScheduleResult,
    ScheduleSummary,
    StageResult,
    StageSpec,
    ThroughputParameters,
    Weekday,
)
from .scheduler import CascadeScheduler
from .service import calculate

__all__ = [
    "DEFAULT_STAGE_NAMES",
    "CalculatorConfig",
    "CascadeScheduler",
    "ConfigError",
    "InsufficientInputError",
    "InvalidInputError",
    "NoResultsError",
    "NonWorkingDayRule",
    "ScheduleInput",
    "ScheduleResult",
    "ScheduleSummary",
    "StageAllocator",
    "StageResult",
    "StageSpec",
    "StagecalcError",
    "ThroughputParameters",
    "ValidationError",
    "Weekday",
    "calculate",
]
