"""Command-line interface for stagecalc."""

from __future__ import annotations

import io
from enum import Enum
from pathlib import Path
from typing import Annotated, TextIO

import typer

from . import context
from .config import CalculatorConfig, discover_config
from .exceptions import StagecalcError
from .export import render_report, write_csv, write_yaml
from .formatting import format_calendar_date, format_duration
from .logger import setup_logger
from .models import NonWorkingDayRule, ScheduleInput, ScheduleResult, Weekday
from .service import calculate

app = typer.Typer(
    name="stagecalc",
    help="Multi-stage installation duration calculator with a weekly non-working day",
    add_completion=False,
)


class OutputFormat(str, Enum):
    """Output formats for the calculate command."""

    TABLE = "table"
    CSV = "csv"
    YAML = "yaml"
    REPORT = "report"


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=stage results, 2=checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to config file (default: stagecalc.yaml)"),
    ] = None,
) -> None:
    """Global options for stagecalc commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _split_stage_units(stage_units: str | None) -> list[str]:
    """Split "40,,30," into per-stage values, keeping blanks in position."""
    if stage_units is None:
        return []
    return [value.strip() for value in stage_units.split(",")]


def _load_config() -> CalculatorConfig:
    try:
        return discover_config()
    except (FileNotFoundError, StagecalcError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def _echo_table(result: ScheduleResult, locale: str, out: TextIO) -> None:
    if result.is_empty:
        out.write("No stage has units; nothing was scheduled.\n")
        return

    for stage in result.results:
        out.write(
            f"{stage.name}: {stage.units} units, "
            f"{format_calendar_date(stage.start_date, locale)} -> "
            f"{format_calendar_date(stage.end_date, locale)} "
            f"({format_duration(stage.calendar_duration, locale)})\n"
        )

    summary = result.summary
    total = "-" if summary.total_units is None else summary.total_units
    out.write("\n")
    out.write(f"Total units: {total}\n")
    out.write(f"Project start: {format_calendar_date(summary.project_start, locale)}\n")
    out.write(
        f"Total duration: {format_duration(summary.total_calendar_duration, locale)}\n"
    )
    out.write(f"Project end: {format_calendar_date(summary.project_end, locale)}\n")


@app.command(name="calculate")
def calculate_command(  # noqa: PLR0913 - CLI command needs multiple options
    rate: Annotated[
        str, typer.Option("--rate", "-r", help="Units one team completes per workday")
    ],
    teams: Annotated[str, typer.Option("--teams", "-n", help="Number of teams")],
    start: Annotated[str, typer.Option("--start", "-s", help="Start date (YYYY-MM-DD)")],
    *,
    total: Annotated[
        str | None, typer.Option("--total", "-t", help="Total units to split across stages")
    ] = None,
    stage_units: Annotated[
        str | None,
        typer.Option(
            "--stage-units",
            help="Comma-separated units per stage, blanks allowed (e.g. '40,,30,')",
        ),
    ] = None,
    off_day: Annotated[
        Weekday | None,
        typer.Option("--off-day", help="Weekly non-working day (overrides config)"),
    ] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.TABLE,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
    locale: Annotated[
        str | None, typer.Option("--locale", help="Label language: en or ar (overrides config)")
    ] = None,
) -> None:
    """Calculate stage start and end dates for an installation project."""
    config = _load_config()
    locale = locale or config.locale
    if locale not in ("en", "ar"):
        typer.echo(f"Error: Invalid locale '{locale}'. Must be 'en' or 'ar'.", err=True)
        raise typer.Exit(1)

    rule = NonWorkingDayRule(off_day) if off_day else config.non_working_day_rule
    schedule_input = ScheduleInput(
        rate_per_team_per_day=rate,
        team_count=teams,
        start_date=start,
        total_units=total,
        per_stage_units=_split_stage_units(stage_units),
        non_working_day=rule,
    )

    # --output is written only once the whole schedule has rendered
    buffer = io.StringIO()
    try:
        result = calculate(schedule_input, config)
        if output_format == OutputFormat.CSV:
            write_csv(result, buffer)
        elif output_format == OutputFormat.YAML:
            write_yaml(result, buffer)
        elif output_format == OutputFormat.REPORT:
            buffer.write(render_report(result, config.report_title, locale))
        else:
            _echo_table(result, locale, buffer)
    except StagecalcError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    if output:
        output.write_text(buffer.getvalue(), encoding="utf-8", newline="")
        typer.echo(f"Schedule written to {output}")
    else:
        typer.echo(buffer.getvalue(), nl=False)

