"""
Overdue overlay service.

An unfinished item whose deadline has passed gets a highlighted segment from
the day after its deadline up to now (or the end of the window).
"""

from datetime import datetime, timedelta
from typing import Optional

from timeline_layout.core.config import get_settings
from timeline_layout.models.enums import OverdueGranularity
from timeline_layout.models.timeline import OverlaySegment, Position, TimeWindow
from timeline_layout.models.work_item import WorkItem
from timeline_layout.services.position_service import time_to_offset
from timeline_layout.utils.datetime_utils import ONE_DAY, ONE_HOUR, ensure_utc


def overdue_amount(elapsed: timedelta) -> tuple[OverdueGranularity, int]:
    """Whole days when at least a day overdue, whole hours otherwise."""
    if elapsed >= ONE_DAY:
        return OverdueGranularity.DAYS, elapsed // ONE_DAY
    return OverdueGranularity.HOURS, max(0, elapsed // ONE_HOUR)


class OverdueOverlayCalculator:
    """Computes overdue segments; ``now`` is always passed in by the caller."""

    def __init__(
        self,
        day_suffix: Optional[str] = None,
        hour_suffix: Optional[str] = None,
    ):
        settings = get_settings()
        self.day_suffix = day_suffix if day_suffix is not None else settings.OVERDUE_DAY_SUFFIX
        self.hour_suffix = hour_suffix if hour_suffix is not None else settings.OVERDUE_HOUR_SUFFIX

    def format_label(self, granularity: OverdueGranularity, amount: int) -> str:
        suffix = self.day_suffix if granularity == OverdueGranularity.DAYS else self.hour_suffix
        return f"{amount}{suffix}"

    def is_overdue(self, item: WorkItem, now: datetime) -> bool:
        """Deadline passed and the item is not done."""
        if item.deadline is None or item.is_done:
            return False
        return item.deadline < ensure_utc(now)

    def compute_overlay(
        self,
        item: WorkItem,
        position: Optional[Position],
        window: TimeWindow,
        now: datetime,
        day_width: float,
    ) -> Optional[OverlaySegment]:
        """
        Compute the overdue segment of an item's bar.

        Args:
            item: Work item
            position: The item's bar; items without one get no overlay
            window: Visible window
            now: Caller-sampled current instant
            day_width: Pixel width of one day

        Returns:
            OverlaySegment, or None when not overdue or nothing is visible
        """
        if position is None or not self.is_overdue(item, now):
            return None

        now = ensure_utc(now)
        left = time_to_offset(window, item.deadline + ONE_DAY, day_width)
        right = time_to_offset(window, min(now, window.end_exclusive), day_width)
        if right <= left:
            return None

        elapsed = now - item.deadline
        granularity, amount = overdue_amount(elapsed)
        return OverlaySegment(
            left=left,
            width=right - left,
            elapsed=elapsed,
            granularity=granularity,
            amount=amount,
            label=self.format_label(granularity, amount),
        )
