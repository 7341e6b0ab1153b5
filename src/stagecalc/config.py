"""Calculator configuration loaded from stagecalc.yaml.

Example::

    stage_names:
      - Stage 1
      - Stage 2
      - Stage 3
    non_working_day: friday
    max_stage_workdays: 5000
    locale: ar
    report_title: Installation schedule
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from . import context
from .allocator import DEFAULT_STAGE_NAMES
from .exceptions import ConfigError
from .models import NonWorkingDayRule, Weekday

DEFAULT_CONFIG_FILENAME = "stagecalc.yaml"


class CalculatorConfig(BaseModel):
    """Stage layout, calendar rule and limits for the calculator."""

    stage_names: list[str] = Field(default_factory=lambda: list(DEFAULT_STAGE_NAMES))
    non_working_day: Weekday = Weekday.FRIDAY
    # Guards against huge unit counts divided by a tiny rate
    max_stage_workdays: int = Field(default=100_000, gt=0)
    locale: Literal["en", "ar"] = "en"
    report_title: str = "Installation duration report"

    @field_validator("stage_names")
    @classmethod
    def validate_stage_names(cls, names: list[str]) -> list[str]:
        """Require at least one stage and unique, non-blank names."""
        if not names:
            raise ValueError("stage_names must list at least one stage")
        if any(not name.strip() for name in names):
            raise ValueError("stage names must not be blank")
        if len(set(names)) != len(names):
            raise ValueError("stage names must be unique")
        return names

    @property
    def non_working_day_rule(self) -> NonWorkingDayRule:
        return NonWorkingDayRule(weekday=self.non_working_day)


def load_config(config_path: Path | str) -> CalculatorConfig:
    """Load calculator configuration from a YAML file.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ConfigError: If the file is empty or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e

    if not data:
        raise ConfigError(f"Empty configuration file: {config_path}")
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the root level")

    try:
        return CalculatorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


def discover_config(config_path: Path | None = None) -> CalculatorConfig:
    """Find and load configuration, falling back to defaults.

    Search order:
    1. Explicit config_path argument
    2. Global context (set via CLI --config)
    3. Current directory / stagecalc.yaml
    """
    if config_path is not None:
        return load_config(config_path)

    ctx_config = context.get_config_path()
    if ctx_config is not None:
        return load_config(ctx_config)

    local = Path.cwd() / DEFAULT_CONFIG_FILENAME
    if local.exists():
        return load_config(local)

    return CalculatorConfig()
