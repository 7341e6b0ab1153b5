"""Localized labels for dates and durations."""

from __future__ import annotations

from datetime import date

# Indexed like date.weekday(): Monday first
WEEKDAY_NAMES: dict[str, tuple[str, ...]] = {
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    "ar": ("الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت", "الأحد"),
}

_SEPARATORS = {"en": ", ", "ar": "، "}
_DAY_UNITS = {"en": ("day", "days"), "ar": ("يوم", "يوم")}


def _check_locale(locale: str) -> None:
    if locale not in WEEKDAY_NAMES:
        supported = ", ".join(WEEKDAY_NAMES)
        raise ValueError(f"Unsupported locale '{locale}'. Must be one of: {supported}")


def weekday_name(day: date, locale: str = "en") -> str:
    _check_locale(locale)
    return WEEKDAY_NAMES[locale][day.weekday()]


def format_calendar_date(day: date | None, locale: str = "en") -> str:
    """Render a date as "<weekday>, <YYYY-MM-DD>", or "-" when missing."""
    if day is None:
        return "-"
    return f"{weekday_name(day, locale)}{_SEPARATORS[locale]}{day.isoformat()}"


def format_duration(days: int, locale: str = "en") -> str:
    _check_locale(locale)
    singular, plural = _DAY_UNITS[locale]
    return f"{days} {singular if days == 1 else plural}"
