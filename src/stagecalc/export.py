"""Export of schedule results as plain rows, CSV, YAML and a printable report.

Rows hold only built-in types (dates as ISO strings) so any spreadsheet or
print backend can consume them without touching the scheduling records.
"""

from __future__ import annotations

import csv
from datetime import date
from typing import Any, TextIO

import yaml

from .exceptions import NoResultsError
from .formatting import format_calendar_date, format_duration
from .models import ScheduleResult

RESULT_COLUMNS = ("stage", "units", "start_date", "end_date", "calendar_duration")

_REPORT_HEADERS = {
    "en": ("Stage", "Units", "Start date", "End date", "Duration"),
    "ar": ("المرحلة", "عدد الخزائن", "تاريخ البداية", "تاريخ الانتهاء", "المدة"),
}

_SUMMARY_LABELS = {
    "en": {
        "total_units": "Total units",
        "project_start": "Project start",
        "total_calendar_duration": "Total project duration",
        "project_end": "Project end",
        "printed_on": "Printed on",
    },
    "ar": {
        "total_units": "إجمالي عدد الخزائن",
        "project_start": "تاريخ بداية مرحلة التركيبات",
        "total_calendar_duration": "المدة الكلية للمشروع",
        "project_end": "تاريخ الانتهاء الكلي",
        "printed_on": "تاريخ الطباعة",
    },
}


def _require_results(result: ScheduleResult) -> None:
    if result.is_empty:
        raise NoResultsError()


def result_rows(result: ScheduleResult) -> list[dict[str, Any]]:
    """One row per scheduled stage, keyed by RESULT_COLUMNS."""
    return [
        {
            "stage": stage.name,
            "units": stage.units,
            "start_date": stage.start_date.isoformat(),
            "end_date": stage.end_date.isoformat(),
            "calendar_duration": stage.calendar_duration,
        }
        for stage in result.results
    ]


def summary_row(result: ScheduleResult) -> dict[str, Any]:
    summary = result.summary
    return {
        "total_units": summary.total_units,
        "project_start": summary.project_start.isoformat(),
        "total_calendar_duration": summary.total_calendar_duration,
        "project_end": summary.project_end.isoformat() if summary.project_end else None,
    }


def write_csv(result: ScheduleResult, out: TextIO) -> None:
    """Write the stage table as CSV.

    Raises:
        NoResultsError: If no stage was scheduled
    """
    _require_results(result)
    writer = csv.DictWriter(out, fieldnames=RESULT_COLUMNS)
    writer.writeheader()
    writer.writerows(result_rows(result))


def write_yaml(result: ScheduleResult, out: TextIO) -> None:
    """Write stages and summary as a YAML document.

    Raises:
        NoResultsError: If no stage was scheduled
    """
    _require_results(result)
    output = {"stages": result_rows(result), "summary": summary_row(result)}
    yaml.safe_dump(output, out, default_flow_style=False, sort_keys=False, allow_unicode=True)


def render_report(
    result: ScheduleResult,
    title: str,
    locale: str = "en",
    printed_on: date | None = None,
) -> str:
    """Render a printable Markdown report with the stage table and summary.

    Args:
        result: Schedule to print
        title: Report heading
        locale: Label language ("en" or "ar")
        printed_on: Print date shown under the title (defaults to today)

    Raises:
        NoResultsError: If no stage was scheduled
    """
    _require_results(result)
    headers = _REPORT_HEADERS[locale]
    labels = _SUMMARY_LABELS[locale]
    printed_on = printed_on or date.today()
    summary = result.summary

    lines = [
        f"# {title}",
        "",
        f"{labels['printed_on']}: {printed_on.isoformat()}",
        "",
        "| " + " | ".join(headers) + " |",
        "|" + "---|" * len(headers),
    ]
    for stage in result.results:
        cells = (
            stage.name,
            str(stage.units),
            format_calendar_date(stage.start_date, locale),
            format_calendar_date(stage.end_date, locale),
            format_duration(stage.calendar_duration, locale),
        )
        lines.append("| " + " | ".join(cells) + " |")

    total = "-" if summary.total_units is None else str(summary.total_units)
    lines.extend(
        [
            "",
            f"- **{labels['total_units']}:** {total}",
            f"- **{labels['project_start']}:** "
            f"{format_calendar_date(summary.project_start, locale)}",
            f"- **{labels['total_calendar_duration']}:** "
            f"{format_duration(summary.total_calendar_duration, locale)}",
            f"- **{labels['project_end']}:** {format_calendar_date(summary.project_end, locale)}",
        ]
    )
    return "\n".join(lines) + "\n"
