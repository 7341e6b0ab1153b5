"""Pytest configuration and fixtures for stagecalc tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import date
from typing import Any

import pytest

from stagecalc import context
from stagecalc.logger import reset_logger
from stagecalc.models import NonWorkingDayRule, ScheduleInput, ThroughputParameters

# 2025-01-05 is a Sunday; the Fridays that follow are the 10th, 17th and 24th
SUNDAY = date(2025, 1, 5)
FRIDAY = date(2025, 1, 10)


@pytest.fixture(autouse=True)
def clean_state() -> Iterator[None]:
    """Reset the logger and global config path around every test."""
    reset_logger()
    context.set_config_path(None)
    yield
    reset_logger()
    context.set_config_path(None)


@pytest.fixture
def friday_off() -> NonWorkingDayRule:
    return NonWorkingDayRule()


@pytest.fixture
def rate_ten() -> ThroughputParameters:
    """Combined rate of 10 units per workday."""
    return ThroughputParameters(rate_per_team_per_day=10.0, team_count=1)


@pytest.fixture
def make_input() -> Callable[..., ScheduleInput]:
    """Factory for ScheduleInput with valid throughput defaults."""

    def _make(**overrides: Any) -> ScheduleInput:
        values: dict[str, Any] = {
            "rate_per_team_per_day": "10",
            "team_count": "1",
            "start_date": SUNDAY.isoformat(),
        }
        values.update(overrides)
        return ScheduleInput(**values)

    return _make
