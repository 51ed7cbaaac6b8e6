"""
Timeline layout service.

Composes the window, zoom, position, lane, overlay and group services into a
single pure ``layout`` call. Nothing is cached between calls and ``now`` is
sampled by the caller once per call.
"""

from datetime import datetime
from typing import Optional, Sequence

from timeline_layout.core.exceptions import DuplicateError, ValidationError
from timeline_layout.core.logger import setup_logger
from timeline_layout.models.timeline import (
    DayCell,
    GroupLayout,
    ItemGroup,
    LaidOutItem,
    LayoutResult,
    Position,
    RowMetrics,
    TimeWindow,
)
from timeline_layout.models.view import ViewConfig
from timeline_layout.models.work_item import ReferenceData, WorkItem
from timeline_layout.services.group_service import GroupAggregator
from timeline_layout.services.lane_service import LanePacker
from timeline_layout.services.overlay_service import OverdueOverlayCalculator
from timeline_layout.services.position_service import PositionMapper
from timeline_layout.services.window_service import TimeWindowCalculator
from timeline_layout.services.zoom_service import ZoomController
from timeline_layout.utils.datetime_utils import ensure_utc, local_date

logger = setup_logger(__name__)

SATURDAY = 5


class TimelineLayoutService:
    """
    Service for laying out a task timeline.

    Provides:
    - Day window and per-day width for the view
    - Rows grouped by assignee, project or status
    - Non-overlapping lanes per row
    - Overdue overlays relative to the supplied ``now``
    """

    def __init__(
        self,
        window_calculator: Optional[TimeWindowCalculator] = None,
        zoom_controller: Optional[ZoomController] = None,
        position_mapper: Optional[PositionMapper] = None,
        lane_packer: Optional[LanePacker] = None,
        overlay_calculator: Optional[OverdueOverlayCalculator] = None,
        group_aggregator: Optional[GroupAggregator] = None,
    ):
        self.window_calculator = window_calculator or TimeWindowCalculator()
        self.zoom_controller = zoom_controller or ZoomController()
        self.position_mapper = position_mapper or PositionMapper()
        self.lane_packer = lane_packer or LanePacker()
        self.overlay_calculator = overlay_calculator or OverdueOverlayCalculator()
        self.group_aggregator = group_aggregator or GroupAggregator()

    def layout(
        self,
        items: Sequence[WorkItem],
        view_config: ViewConfig,
        now: datetime,
        reference: Optional[ReferenceData] = None,
    ) -> LayoutResult:
        """
        Lay out work items for one view.

        Args:
            items: Read-only snapshot of work items
            view_config: Window kind, anchor, zoom and grouping
            now: Current instant, sampled once by the caller
            reference: Assignee/project ordering for grouping

        Returns:
            LayoutResult with every item annotated (unplaced items keep their
            group membership but carry no geometry or lane)

        Raises:
            ValidationError: if ``now`` is missing
            DuplicateError: if two items share an id
        """
        if now is None:
            raise ValidationError("layout requires the caller to supply 'now'")
        now = ensure_utc(now)
        self._check_unique_ids(items)

        window = self.window_calculator.compute_window(
            view_config.anchor, view_config.kind, view_config.timezone
        )
        zoom = self.zoom_controller.clamp_zoom(view_config.zoom_percent)
        day_width = self.zoom_controller.compute_day_width(zoom, view_config.kind)
        row = RowMetrics.for_zoom(zoom)

        groups = self.group_aggregator.group_items(items, view_config.group_by, reference)
        group_layouts = tuple(
            self._layout_group(group, window, day_width, now, row) for group in groups
        )

        result = LayoutResult(
            window=window,
            day_width=day_width,
            total_width=window.length * day_width,
            row=row,
            days=self._day_cells(window, day_width, now),
            groups=group_layouts,
            today_offset=self._today_offset(window, day_width, now),
            total_items=len(items),
        )

        placed = sum(1 for group in group_layouts for laid in group.items if laid.is_placed)
        logger.debug(
            f"Timeline layout: {placed}/{len(items)} items placed in "
            f"{len(group_layouts)} groups ({window.first_day} - {window.last_day}, "
            f"{day_width:.1f}px/day)"
        )
        return result

    def _check_unique_ids(self, items: Sequence[WorkItem]) -> None:
        seen: set[str] = set()
        for item in items:
            if item.id in seen:
                raise DuplicateError(
                    f"Duplicate item id in layout: {item.id}",
                    details={"item_id": item.id},
                )
            seen.add(item.id)

    def _layout_group(
        self,
        group: ItemGroup,
        window: TimeWindow,
        day_width: float,
        now: datetime,
        row: RowMetrics,
    ) -> GroupLayout:
        positioned = self.position_mapper.position_items(list(group.items), window, day_width)
        lanes = self.lane_packer.pack_lanes(positioned)
        positions = {
            bar.id: Position(left=bar.left, width=bar.width) for bar in positioned
        }

        laid_out: list[LaidOutItem] = []
        for item in group.items:
            position = positions.get(item.id)
            if position is None:
                laid_out.append(LaidOutItem(item=item))
                continue
            lane = lanes.lane_of[item.id]
            laid_out.append(
                LaidOutItem(
                    item=item,
                    left=position.left,
                    width=position.width,
                    lane=lane,
                    top=row.lane_top(lane),
                    overlay=self.overlay_calculator.compute_overlay(
                        item, position, window, now, day_width
                    ),
                )
            )

        return GroupLayout(
            id=group.id,
            label=group.label,
            avatar=group.avatar,
            items=tuple(laid_out),
            lane_count=lanes.lane_count,
            height=row.group_height(lanes.lane_count),
        )

    def _day_cells(self, window: TimeWindow, day_width: float, now: datetime) -> tuple[DayCell, ...]:
        today = local_date(now, window.timezone)
        return tuple(
            DayCell(
                day=day,
                left=index * day_width,
                is_today=day == today,
                is_weekend=day.weekday() >= SATURDAY,
                shows_month=index == 0 or day.day == 1,
            )
            for index, day in enumerate(window.days)
        )

    def _today_offset(self, window: TimeWindow, day_width: float, now: datetime) -> Optional[float]:
        """Centre of today's column, or None when today is outside the window."""
        today = local_date(now, window.timezone)
        if not window.first_day <= today <= window.last_day:
            return None
        index = (today - window.first_day).days
        return (index + 0.5) * day_width


def layout(
    items: Sequence[WorkItem],
    view_config: ViewConfig,
    now: datetime,
    reference: Optional[ReferenceData] = None,
) -> LayoutResult:
    """Lay out items with default settings."""
    return TimelineLayoutService().layout(items, view_config, now, reference)
