"""
Unit tests for TimeWindowCalculator.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from timeline_layout.models.enums import ViewKind
from timeline_layout.services.window_service import TimeWindowCalculator


@pytest.fixture
def calculator() -> TimeWindowCalculator:
    return TimeWindowCalculator(month_days=30, timezone="UTC")


def test_week_starts_on_monday(calculator):
    window = calculator.compute_window(date(2024, 1, 3), ViewKind.WEEK)

    assert window.first_day == date(2024, 1, 1)
    assert window.last_day == date(2024, 1, 7)
    assert window.length == 7


def test_sunday_anchor_belongs_to_preceding_monday(calculator):
    window = calculator.compute_window(date(2024, 1, 7), ViewKind.WEEK)

    assert date(2024, 1, 7).weekday() == 6
    assert window.first_day == date(2024, 1, 1)


def test_monday_anchor_starts_its_own_week(calculator):
    window = calculator.compute_window(date(2024, 1, 8), ViewKind.WEEK)

    assert window.first_day == date(2024, 1, 8)


def test_two_weeks_has_fourteen_days(calculator):
    window = calculator.compute_window(date(2024, 1, 10), ViewKind.TWO_WEEKS)

    assert window.first_day == date(2024, 1, 8)
    assert window.length == 14
    assert window.last_day == date(2024, 1, 21)


def test_month_window_is_fixed_thirty_days_from_first(calculator):
    window = calculator.compute_window(date(2024, 2, 15), ViewKind.MONTH)

    assert window.first_day == date(2024, 2, 1)
    assert window.length == 30
    # February 2024 has 29 days, so the window spills into March
    assert window.last_day == date(2024, 3, 1)


def test_month_window_uses_anchor_month_even_on_a_sunday_first(calculator):
    # 2026-03-01 is a Sunday; its Monday lies in February
    window = calculator.compute_window(date(2026, 3, 1), ViewKind.MONTH)

    assert window.first_day == date(2026, 3, 1)


@pytest.mark.parametrize("kind, length", [
    (ViewKind.WEEK, 7),
    (ViewKind.TWO_WEEKS, 14),
    (ViewKind.MONTH, 30),
])
def test_window_days_are_consecutive(calculator, kind, length):
    anchor = date(2023, 12, 1)
    for offset in range(0, 400, 13):
        window = calculator.compute_window(anchor + timedelta(days=offset), kind)

        assert window.length == length
        assert all(
            later - earlier == timedelta(days=1)
            for earlier, later in zip(window.days, window.days[1:])
        )
        boundaries = window.boundaries
        assert all(a < b for a, b in zip(boundaries, boundaries[1:]))


def test_anchor_instant_uses_view_timezone(calculator):
    # Sunday 23:00 UTC is already Monday morning in Tokyo
    anchor = datetime(2024, 1, 7, 23, 0, tzinfo=timezone.utc)

    utc_window = calculator.compute_window(anchor, ViewKind.WEEK)
    tokyo_window = calculator.compute_window(anchor, ViewKind.WEEK, timezone="Asia/Tokyo")

    assert utc_window.first_day == date(2024, 1, 1)
    assert tokyo_window.first_day == date(2024, 1, 8)
    assert tokyo_window.timezone == "Asia/Tokyo"
    assert tokyo_window.start == datetime(2024, 1, 7, 15, 0, tzinfo=timezone.utc)


def test_unknown_kind_falls_back_to_week(calculator, caplog):
    window = calculator.compute_window(date(2024, 1, 3), "quarter")

    assert window.length == 7
    assert "Unknown view kind" in caplog.text


def test_kind_accepts_member_name(calculator):
    window = calculator.compute_window(date(2024, 1, 3), "two_weeks")

    assert window.length == 14


def test_window_edges(calculator):
    window = calculator.compute_window(date(2024, 1, 3), ViewKind.WEEK)

    assert window.start == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert window.end == datetime(2024, 1, 7, tzinfo=timezone.utc)
    assert window.end_exclusive == datetime(2024, 1, 8, tzinfo=timezone.utc)


class TestShiftAnchor:
    """Navigation between windows."""

    def test_week_moves_seven_days(self, calculator):
        assert calculator.shift_anchor(date(2024, 1, 3), ViewKind.WEEK, 1) == date(2024, 1, 10)
        assert calculator.shift_anchor(date(2024, 1, 3), ViewKind.WEEK, -1) == date(2023, 12, 27)

    def test_two_weeks_also_moves_seven_days(self, calculator):
        assert calculator.shift_anchor(date(2024, 1, 3), ViewKind.TWO_WEEKS, 1) == date(2024, 1, 10)

    def test_month_moves_one_calendar_month(self, calculator):
        assert calculator.shift_anchor(date(2024, 1, 15), ViewKind.MONTH, 1) == date(2024, 2, 15)
        assert calculator.shift_anchor(date(2024, 1, 15), ViewKind.MONTH, -1) == date(2023, 12, 15)

    def test_month_clamps_day_of_month(self, calculator):
        assert calculator.shift_anchor(date(2024, 1, 31), ViewKind.MONTH, 1) == date(2024, 2, 29)
        assert calculator.shift_anchor(date(2024, 3, 31), ViewKind.MONTH, -1) == date(2024, 2, 29)

    def test_datetime_anchor_keeps_time_and_zone(self, calculator):
        anchor = datetime(2024, 1, 31, 9, 30, tzinfo=timezone.utc)

        shifted = calculator.shift_anchor(anchor, ViewKind.MONTH, 1)

        assert shifted == datetime(2024, 2, 29, 9, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize("kind, length", [
    ("week", 7),
    ("two-week", 14),
    ("two_weeks", 14),
    ("Two-Week", 14),
    ("month-fixed-30", 30),
    ("2weeks", 14),
    ("month", 30),
])
def test_kind_spellings(calculator, kind, length, caplog):
    window = calculator.compute_window(date(2024, 3, 13), kind)

    assert window.length == length
    assert "Unknown view kind" not in caplog.text


@pytest.mark.parametrize("anchor", [
    date(2024, 1, 8),
    datetime(2024, 1, 8),
    datetime(2024, 1, 8, 23, 30),
])
def test_naive_anchor_is_wall_clock_time_west_of_utc(calculator, anchor):
    window = calculator.compute_window(anchor, ViewKind.WEEK, timezone="America/New_York")

    assert window.first_day == date(2024, 1, 8)
