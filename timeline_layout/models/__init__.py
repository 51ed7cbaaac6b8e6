"""Pydantic models for the timeline layout."""

from timeline_layout.models.enums import (
    GroupBy,
    OverdueGranularity,
    Priority,
    TaskStatus,
    ViewKind,
)
from timeline_layout.models.work_item import Identity, ReferenceData, WorkItem
from timeline_layout.models.view import ViewConfig
from timeline_layout.models.timeline import (
    DayCell,
    GroupLayout,
    ItemGroup,
    LaidOutItem,
    LaneAssignment,
    LayoutResult,
    OverlaySegment,
    Position,
    PositionedItem,
    RowMetrics,
    TimeWindow,
)

__all__ = [
    # Enums
    "GroupBy",
    "OverdueGranularity",
    "Priority",
    "TaskStatus",
    "ViewKind",
    # Input
    "Identity",
    "ReferenceData",
    "ViewConfig",
    "WorkItem",
    # Layout
    "DayCell",
    "GroupLayout",
    "ItemGroup",
    "LaidOutItem",
    "LaneAssignment",
    "LayoutResult",
    "OverlaySegment",
    "Position",
    "PositionedItem",
    "RowMetrics",
    "TimeWindow",
]
