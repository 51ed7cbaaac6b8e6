"""
Lane packing service.

Assigns every bar of a group to a horizontal lane so that bars sharing a lane
never overlap (greedy interval colouring). Sorting by left edge and taking
the first free lane uses the minimum possible number of lanes, which equals
the largest number of bars overlapping at any single point.
"""

import heapq
from typing import Optional, Sequence

from timeline_layout.core.config import get_settings
from timeline_layout.core.exceptions import DuplicateError
from timeline_layout.core.logger import setup_logger
from timeline_layout.models.timeline import LaneAssignment, PositionedItem

logger = setup_logger(__name__)

# Pixel slack when comparing edges, absorbs float rounding of touching bars
EDGE_TOLERANCE = 1e-6


def _sorted_by_left(items: Sequence[PositionedItem]) -> list[PositionedItem]:
    """Stable sort by left edge; ties keep input order."""
    seen: set[str] = set()
    for positioned in items:
        if positioned.id in seen:
            raise DuplicateError(
                f"Duplicate item id in lane packing: {positioned.id}",
                details={"item_id": positioned.id},
            )
        seen.add(positioned.id)
    return sorted(items, key=lambda positioned: positioned.left)


def pack_lanes_scan(items: Sequence[PositionedItem]) -> LaneAssignment:
    """
    Reference first-fit packing, O(n * lanes).

    Each lane remembers the right edge of its last bar; a bar goes into the
    first lane that ends at or before its left edge.
    """
    lane_ends: list[float] = []
    lane_of: dict[str, int] = {}

    for positioned in _sorted_by_left(items):
        for lane, lane_end in enumerate(lane_ends):
            if lane_end <= positioned.left + EDGE_TOLERANCE:
                lane_ends[lane] = positioned.right
                lane_of[positioned.id] = lane
                break
        else:
            lane_of[positioned.id] = len(lane_ends)
            lane_ends.append(positioned.right)

    return LaneAssignment(lane_of=lane_of, lane_count=len(lane_ends))


def pack_lanes_heap(items: Sequence[PositionedItem]) -> LaneAssignment:
    """
    Heap-based packing, O(n log n), same assignment as ``pack_lanes_scan``.

    Busy lanes sit in a heap keyed by right edge. Because bars arrive in
    left-edge order, a lane that becomes free stays free until reused, so the
    lowest free lane index is exactly the lane the first-fit scan would pick.
    """
    busy: list[tuple[float, int]] = []
    free: list[int] = []
    lane_count = 0
    lane_of: dict[str, int] = {}

    for positioned in _sorted_by_left(items):
        while busy and busy[0][0] <= positioned.left + EDGE_TOLERANCE:
            _, lane = heapq.heappop(busy)
            heapq.heappush(free, lane)

        if free:
            lane = heapq.heappop(free)
        else:
            lane = lane_count
            lane_count += 1

        lane_of[positioned.id] = lane
        heapq.heappush(busy, (positioned.right, lane))

    return LaneAssignment(lane_of=lane_of, lane_count=lane_count)


class LanePacker:
    """Packs a group's bars into lanes, switching to the heap packer for big groups."""

    def __init__(self, heap_threshold: Optional[int] = None):
        self.heap_threshold = (
            heap_threshold if heap_threshold is not None else get_settings().LANE_HEAP_THRESHOLD
        )

    def pack_lanes(self, items: Sequence[PositionedItem]) -> LaneAssignment:
        """
        Assign a lane to every positioned item.

        Args:
            items: Positioned items of one group

        Returns:
            LaneAssignment; empty input gives zero lanes

        Raises:
            DuplicateError: if two items share an id
        """
        if len(items) > self.heap_threshold:
            logger.debug(f"Packing {len(items)} bars with the heap packer")
            return pack_lanes_heap(items)
        return pack_lanes_scan(items)
