"""Tests for configuration loading."""

from pathlib import Path

import pytest

from stagecalc import context
from stagecalc.allocator import DEFAULT_STAGE_NAMES
from stagecalc.config import CalculatorConfig, discover_config, load_config
from stagecalc.exceptions import ConfigError
from stagecalc.models import Weekday


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "stagecalc.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    config = CalculatorConfig()
    assert config.stage_names == list(DEFAULT_STAGE_NAMES)
    assert config.non_working_day == Weekday.FRIDAY
    assert config.non_working_day_rule.weekday == Weekday.FRIDAY
    assert config.locale == "en"


def test_load_config(tmp_path: Path):
    path = _write(
        tmp_path,
        """
stage_names:
  - Survey
  - Install
non_working_day: saturday
max_stage_workdays: 500
locale: ar
report_title: Site report
""",
    )

    config = load_config(path)

    assert config.stage_names == ["Survey", "Install"]
    assert config.non_working_day == Weekday.SATURDAY
    assert config.max_stage_workdays == 500
    assert config.locale == "ar"
    assert config.report_title == "Site report"


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "- just\n- a list\n",
        "non_working_day: someday\n",
        "stage_names: []\n",
        "stage_names: [A, A]\n",
        "max_stage_workdays: 0\n",
        "locale: fr\n",
        "stage_names: [unclosed\n",
    ],
)
def test_invalid_config(tmp_path: Path, text: str):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, text))


class TestDiscoverConfig:
    """Tests for config discovery order."""

    def test_defaults_when_nothing_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert discover_config() == CalculatorConfig()

    def test_current_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        _write(tmp_path, "stage_names: [Only]\n")
        monkeypatch.chdir(tmp_path)
        assert discover_config().stage_names == ["Only"]

    def test_context_path(self, tmp_path: Path):
        path = _write(tmp_path, "locale: ar\n")
        context.set_config_path(path)
        assert discover_config().locale == "ar"

    def test_explicit_path_wins(self, tmp_path: Path):
        context.set_config_path(_write(tmp_path, "locale: ar\n"))
        explicit = tmp_path / "other.yaml"
        explicit.write_text("locale: en\n", encoding="utf-8")
        assert discover_config(explicit).locale == "en"
