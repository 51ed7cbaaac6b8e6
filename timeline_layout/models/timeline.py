"""
Timeline layout models.

Every value here is produced fresh by a layout call and never mutated.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from timeline_layout.models.enums import OverdueGranularity
from timeline_layout.models.work_item import WorkItem
from timeline_layout.utils.datetime_utils import ONE_DAY, day_start_utc


class TimeWindow(BaseModel):
    """Contiguous run of calendar days shown on the timeline."""

    model_config = ConfigDict(frozen=True)

    days: tuple[date, ...]
    timezone: str = "UTC"

    @model_validator(mode="after")
    def validate_contiguous(self):
        """Days must be non-empty, ascending and one day apart."""
        if not self.days:
            raise ValueError("time window must contain at least one day")
        for previous, current in zip(self.days, self.days[1:]):
            if current - previous != ONE_DAY:
                raise ValueError(
                    f"time window days must be consecutive: {previous} -> {current}"
                )
        return self

    @property
    def length(self) -> int:
        return len(self.days)

    @property
    def first_day(self) -> date:
        return self.days[0]

    @property
    def last_day(self) -> date:
        return self.days[-1]

    @property
    def boundaries(self) -> list[datetime]:
        """Start of every day plus the end of the last day, in UTC."""
        days = list(self.days) + [self.days[-1] + ONE_DAY]
        return [day_start_utc(day, self.timezone) for day in days]

    @property
    def start(self) -> datetime:
        return day_start_utc(self.first_day, self.timezone)

    @property
    def end(self) -> datetime:
        """Boundary of the last day (its midnight)."""
        return day_start_utc(self.last_day, self.timezone)

    @property
    def end_exclusive(self) -> datetime:
        """First instant after the window."""
        return day_start_utc(self.last_day + ONE_DAY, self.timezone)


class Position(BaseModel):
    """Horizontal geometry of a bar, in pixels from the window start."""

    model_config = ConfigDict(frozen=True)

    left: float = Field(..., ge=0)
    width: float = Field(..., ge=0)

    @property
    def right(self) -> float:
        return self.left + self.width


class PositionedItem(BaseModel):
    """A work item together with its bar geometry."""

    model_config = ConfigDict(frozen=True)

    item: WorkItem
    left: float
    width: float

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def right(self) -> float:
        return self.left + self.width


class LaneAssignment(BaseModel):
    """Lane index per item id plus the number of lanes used."""

    model_config = ConfigDict(frozen=True)

    lane_of: dict[str, int] = Field(default_factory=dict)
    lane_count: int = Field(0, ge=0)


class OverlaySegment(BaseModel):
    """Highlighted part of a bar between the deadline and now."""

    model_config = ConfigDict(frozen=True)

    left: float
    width: float = Field(..., gt=0)
    elapsed: timedelta = Field(..., description="now - deadline")
    granularity: OverdueGranularity
    amount: int = Field(..., ge=0, description="Whole days or whole hours overdue")
    label: str


class ItemGroup(BaseModel):
    """Work items that share an assignee, project or status."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    avatar: Optional[str] = None
    items: tuple[WorkItem, ...] = ()


class LaidOutItem(BaseModel):
    """A work item annotated with its layout; geometry is None when unplaced."""

    model_config = ConfigDict(frozen=True)

    item: WorkItem
    left: Optional[float] = None
    width: Optional[float] = None
    lane: Optional[int] = None
    top: Optional[float] = None
    overlay: Optional[OverlaySegment] = None

    @property
    def is_placed(self) -> bool:
        return self.lane is not None


class RowMetrics(BaseModel):
    """Vertical sizes of group rows and bars at a zoom level."""

    model_config = ConfigDict(frozen=True)

    row_height: int
    bar_height: int
    lane_gap: int = 8
    padding: int = 8

    @classmethod
    def for_zoom(cls, zoom_percent: int) -> "RowMetrics":
        """Rows grow in two steps as the view zooms in."""
        if zoom_percent > 120:
            return cls(row_height=70, bar_height=36)
        if zoom_percent > 80:
            return cls(row_height=60, bar_height=32)
        return cls(row_height=50, bar_height=28)

    def lane_top(self, lane: int) -> int:
        """Vertical offset of a bar in the given lane."""
        return self.padding + lane * (self.bar_height + self.lane_gap)

    def group_height(self, lane_count: int) -> int:
        """Height of a group row holding ``lane_count`` lanes."""
        stacked = lane_count * (self.bar_height + self.lane_gap) + 2 * self.padding
        return max(self.row_height, stacked)


class GroupLayout(BaseModel):
    """A laid out group row."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    avatar: Optional[str] = None
    items: tuple[LaidOutItem, ...] = ()
    lane_count: int = 0
    height: int = 0


class DayCell(BaseModel):
    """Header cell for one day of the window."""

    model_config = ConfigDict(frozen=True)

    day: date
    left: float
    is_today: bool = False
    is_weekend: bool = False
    shows_month: bool = False


class LayoutResult(BaseModel):
    """Everything a renderer needs to paint the timeline."""

    model_config = ConfigDict(frozen=True)

    window: TimeWindow
    day_width: float
    total_width: float
    row: RowMetrics
    days: tuple[DayCell, ...] = ()
    groups: tuple[GroupLayout, ...] = ()
    today_offset: Optional[float] = None
    total_items: int = 0
