"""
Position service: converts work item time spans into bar geometry.
"""

from bisect import bisect_right
from datetime import datetime
from typing import Optional

from timeline_layout.core.config import get_settings
from timeline_layout.models.timeline import Position, PositionedItem, TimeWindow
from timeline_layout.models.work_item import WorkItem
from timeline_layout.utils.datetime_utils import ONE_DAY, ensure_utc


def time_to_offset(window: TimeWindow, instant: datetime, day_width: float) -> float:
    """
    Horizontal pixel offset of an instant, clamped to the window.

    Every calendar day of the window is ``day_width`` wide and time is linear
    inside a day, so days shortened or stretched by DST still line up with
    the header cells.
    """
    boundaries = window.boundaries
    instant = ensure_utc(instant)
    if instant <= boundaries[0]:
        return 0.0
    if instant >= boundaries[-1]:
        return window.length * day_width

    index = bisect_right(boundaries, instant) - 1
    day_start, day_end = boundaries[index], boundaries[index + 1]
    fraction = (instant - day_start) / (day_end - day_start)
    return (index + fraction) * day_width


def resolve_span(item: WorkItem) -> Optional[tuple[datetime, datetime]]:
    """
    Effective (start, end) of an item, or None when it has no dates.

    A missing start falls back to the deadline and vice versa; the end covers
    the whole deadline day.
    """
    start = item.start or item.deadline
    if start is None:
        return None
    end = item.deadline or start
    return start, end + ONE_DAY


class PositionMapper:
    """Maps items onto the window's pixel axis."""

    def __init__(self, min_bar_ratio: Optional[float] = None):
        """
        Initialize position mapper.

        Args:
            min_bar_ratio: Minimum bar width as a fraction of a day, keeps
                short items visible and clickable
        """
        self.min_bar_ratio = (
            min_bar_ratio if min_bar_ratio is not None else get_settings().MIN_BAR_RATIO
        )

    def map_position(
        self,
        item: WorkItem,
        window: TimeWindow,
        day_width: float,
    ) -> Optional[Position]:
        """
        Compute the bar of an item inside the window.

        Args:
            item: Work item to place
            window: Visible window
            day_width: Pixel width of one day

        Returns:
            Position, or None if the item has no dates or lies entirely
            outside the window
        """
        span = resolve_span(item)
        if span is None:
            return None
        start, end = span

        window_start = window.start
        window_end = window.end_exclusive
        if end <= window_start or start >= window_end:
            return None

        total_width = window.length * day_width
        left = time_to_offset(window, max(start, window_start), day_width)
        right = time_to_offset(window, min(end, window_end), day_width)

        # Inverted or very short spans still get a visible bar
        width = max(day_width * self.min_bar_ratio, right - left)
        width = min(width, total_width - left)
        return Position(left=left, width=width)

    def position_items(
        self,
        items: list[WorkItem],
        window: TimeWindow,
        day_width: float,
    ) -> list[PositionedItem]:
        """Positioned items in input order, skipping items that cannot be placed."""
        positioned: list[PositionedItem] = []
        for item in items:
            position = self.map_position(item, window, day_width)
            if position is not None:
                positioned.append(
                    PositionedItem(item=item, left=position.left, width=position.width)
                )
        return positioned
