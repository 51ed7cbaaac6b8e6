"""
Unit tests for timeline models.
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from timeline_layout.models.enums import GroupBy, TaskStatus, ViewKind
from timeline_layout.models.timeline import RowMetrics, TimeWindow
from timeline_layout.models.view import ViewConfig, coerce_enum, lookup_enum
from timeline_layout.models.work_item import WorkItem


class TestWorkItem:
    def test_defaults(self):
        item = WorkItem(id="t1", title="Write report")

        assert item.status == TaskStatus.TODO
        assert item.start is None
        assert item.deadline is None
        assert item.is_done is False

    def test_naive_dates_become_utc(self):
        item = WorkItem(id="t1", title="Write report", deadline=datetime(2024, 1, 3, 9, 0))

        assert item.deadline == datetime(2024, 1, 3, 9, 0, tzinfo=timezone.utc)

    def test_aware_dates_are_converted_to_utc(self):
        tokyo = timezone(timedelta(hours=9))
        item = WorkItem(id="t1", title="Write report", start=datetime(2024, 1, 3, 9, 0, tzinfo=tokyo))

        assert item.start.tzinfo == timezone.utc
        assert item.start.hour == 0

    def test_status_from_value(self):
        item = WorkItem(id="t1", title="Ship", status="Done")

        assert item.is_done is True

    def test_empty_id_is_rejected(self):
        with pytest.raises(ValidationError):
            WorkItem(id="", title="Nameless")

    def test_items_are_immutable(self):
        item = WorkItem(id="t1", title="Write report")

        with pytest.raises(ValidationError):
            item.title = "Changed"


class TestViewConfig:
    def test_unknown_kind_falls_back_to_week(self):
        config = ViewConfig(kind="quarter", anchor=date(2024, 1, 3))

        assert config.kind == ViewKind.WEEK

    def test_unknown_group_falls_back_to_assignee(self):
        config = ViewConfig(anchor=date(2024, 1, 3), group_by="department")

        assert config.group_by == GroupBy.ASSIGNEE

    def test_values_and_names_are_accepted(self):
        config = ViewConfig(kind="2weeks", anchor=date(2024, 1, 3), group_by="STATUS")

        assert config.kind == ViewKind.TWO_WEEKS
        assert config.group_by == GroupBy.STATUS

    @pytest.mark.parametrize("kind, expected", [
        ("two-week", ViewKind.TWO_WEEKS),
        ("month-fixed-30", ViewKind.MONTH),
        ("week", ViewKind.WEEK),
    ])
    def test_kind_spellings(self, kind, expected):
        assert ViewConfig(kind=kind, anchor=date(2024, 1, 3)).kind == expected

    def test_anchor_keeps_datetime(self):
        anchor = datetime(2024, 1, 3, 10, 0, tzinfo=timezone.utc)

        assert ViewConfig(anchor=anchor).anchor == anchor


class TestEnumLookup:
    def test_lookup_by_member_value_and_name(self):
        assert lookup_enum(ViewKind, ViewKind.MONTH) == ViewKind.MONTH
        assert lookup_enum(ViewKind, "month") == ViewKind.MONTH
        assert lookup_enum(ViewKind, "two-weeks") == ViewKind.TWO_WEEKS

    def test_lookup_unknown(self):
        assert lookup_enum(ViewKind, "quarter") is None
        assert lookup_enum(ViewKind, None) is None

    def test_coerce_uses_default(self):
        assert coerce_enum(GroupBy, 42, GroupBy.PROJECT) == GroupBy.PROJECT


class TestTimeWindow:
    def test_days_must_be_consecutive(self):
        with pytest.raises(ValidationError):
            TimeWindow(days=(date(2024, 1, 1), date(2024, 1, 3)))

    def test_days_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            TimeWindow(days=())

    def test_boundaries_follow_timezone(self):
        window = TimeWindow(days=(date(2024, 1, 1), date(2024, 1, 2)), timezone="Asia/Tokyo")

        assert window.boundaries == [
            datetime(2023, 12, 31, 15, tzinfo=timezone.utc),
            datetime(2024, 1, 1, 15, tzinfo=timezone.utc),
            datetime(2024, 1, 2, 15, tzinfo=timezone.utc),
        ]


class TestRowMetrics:
    @pytest.mark.parametrize("zoom, row_height, bar_height", [
        (200, 70, 36),
        (121, 70, 36),
        (120, 60, 32),
        (100, 60, 32),
        (81, 60, 32),
        (80, 50, 28),
        (60, 50, 28),
    ])
    def test_for_zoom(self, zoom, row_height, bar_height):
        metrics = RowMetrics.for_zoom(zoom)

        assert (metrics.row_height, metrics.bar_height) == (row_height, bar_height)

    def test_lane_geometry(self):
        metrics = RowMetrics(row_height=60, bar_height=32)

        assert metrics.lane_top(0) == 8
        assert metrics.lane_top(2) == 88
        assert metrics.group_height(0) == 60
        assert metrics.group_height(3) == 136
