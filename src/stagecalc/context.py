"""Process-wide CLI state shared between the callback and commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class _CliState:
    config_path: Path | None = None


_state = _CliState()


def get_config_path() -> Path | None:
    """Config file chosen with --config, if any."""
    return _state.config_path


def set_config_path(path: Path | None) -> None:
    _state.config_path = path
