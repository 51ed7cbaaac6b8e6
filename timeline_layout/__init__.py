"""Timeline (Gantt) layout core: pure geometry for a task timeline view."""

from timeline_layout.models import (
    GroupBy,
    Identity,
    LayoutResult,
    ReferenceData,
    TaskStatus,
    ViewConfig,
    ViewKind,
    WorkItem,
)
from timeline_layout.services.layout_service import TimelineLayoutService, layout

__all__ = [
    "GroupBy",
    "Identity",
    "LayoutResult",
    "ReferenceData",
    "TaskStatus",
    "TimelineLayoutService",
    "ViewConfig",
    "ViewKind",
    "WorkItem",
    "layout",
]
