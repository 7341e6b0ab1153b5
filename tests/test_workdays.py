"""Tests for calendar stepping around the non-working day."""

from datetime import date, timedelta
from io import StringIO

from stagecalc.logger import debug_enabled, setup_logger
from stagecalc.models import NonWorkingDayRule, Weekday
from stagecalc.workdays import next_workday, step_workdays, workdays_needed
from tests.conftest import FRIDAY, SUNDAY


def test_workdays_needed_rounds_up():
    assert workdays_needed(25, 10) == 3
    assert workdays_needed(20, 10) == 2
    assert workdays_needed(0.5, 10) == 1
    assert workdays_needed(11, 5.0) == 3


def test_rule_defaults_to_friday():
    rule = NonWorkingDayRule()
    assert rule.weekday == Weekday.FRIDAY
    assert not rule.is_working_day(FRIDAY)
    assert rule.is_working_day(SUNDAY)


def test_weekday_index_matches_date_weekday():
    assert Weekday.MONDAY.number == 0
    assert Weekday.FRIDAY.number == 4
    assert Weekday.SUNDAY.number == 6
    assert Weekday.from_date(SUNDAY) == Weekday.SUNDAY


class TestStepWorkdays:
    """Tests for step_workdays."""

    def test_three_workdays_from_sunday(self, friday_off: NonWorkingDayRule):
        """Sunday, Monday and Tuesday all count; the stage ends Tuesday."""
        end, days = step_workdays(SUNDAY, 3, friday_off)
        assert end == date(2025, 1, 7)
        assert days == 3

    def test_start_on_non_working_day(self, friday_off: NonWorkingDayRule):
        """The start day is visited but not counted, so one workday takes two days."""
        end, days = step_workdays(FRIDAY, 1, friday_off)
        assert end == FRIDAY + timedelta(days=1)
        assert days == 2

    def test_span_across_non_working_day(self, friday_off: NonWorkingDayRule):
        """Wednesday, Thursday, (Friday skipped), Saturday."""
        end, days = step_workdays(date(2025, 1, 8), 3, friday_off)
        assert end == date(2025, 1, 11)
        assert days == 4

    def test_single_workday_on_working_day(self, friday_off: NonWorkingDayRule):
        end, days = step_workdays(SUNDAY, 1, friday_off)
        assert end == SUNDAY
        assert days == 1

    def test_saturday_rule(self):
        rule = NonWorkingDayRule(Weekday.SATURDAY)
        end, days = step_workdays(SUNDAY, 3, rule)
        assert end == date(2025, 1, 7)
        assert days == 3

        # Thursday, Friday, (Saturday skipped), Sunday
        end, days = step_workdays(date(2025, 1, 9), 3, rule)
        assert end == date(2025, 1, 12)
        assert days == 4

    def test_end_never_on_non_working_day(self, friday_off: NonWorkingDayRule):
        for offset in range(14):
            start = SUNDAY + timedelta(days=offset)
            for required in range(1, 12):
                end, days = step_workdays(start, required, friday_off)
                assert friday_off.is_working_day(end)
                assert days == (end - start).days + 1


class TestNextWorkday:
    """Tests for next_workday."""

    def test_next_day_when_working(self, friday_off: NonWorkingDayRule):
        assert next_workday(date(2025, 1, 6), friday_off) == date(2025, 1, 7)

    def test_skips_non_working_day(self, friday_off: NonWorkingDayRule):
        """Thursday is followed by Saturday."""
        assert next_workday(date(2025, 1, 9), friday_off) == date(2025, 1, 11)

    def test_from_non_working_day(self, friday_off: NonWorkingDayRule):
        assert next_workday(FRIDAY, friday_off) == date(2025, 1, 11)


class TestStepTracing:
    """Tests for day-by-day debug output while stepping."""

    def test_non_working_days_traced_at_debug(self, friday_off: NonWorkingDayRule):
        stream = StringIO()
        setup_logger(3, stream)
        assert debug_enabled()

        step_workdays(date(2025, 1, 8), 3, friday_off)

        assert "2025-01-10 is a non-working day, not counted" in stream.getvalue()

    def test_no_trace_below_debug(self, friday_off: NonWorkingDayRule):
        stream = StringIO()
        setup_logger(2, stream)
        assert not debug_enabled()

        step_workdays(date(2025, 1, 8), 3, friday_off)

        assert stream.getvalue() == ""
