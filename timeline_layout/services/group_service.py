"""
Group service: splits work items into timeline rows.
"""

from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence

from timeline_layout.core.config import get_settings
from timeline_layout.core.exceptions import DuplicateError
from timeline_layout.core.logger import setup_logger
from timeline_layout.models.enums import STATUS_LABELS, STATUS_ORDER, GroupBy
from timeline_layout.models.timeline import ItemGroup
from timeline_layout.models.view import lookup_enum, resolve_group_by
from timeline_layout.models.work_item import Identity, ReferenceData, WorkItem
from timeline_layout.utils.datetime_utils import UTC

logger = setup_logger(__name__)

UNASSIGNED_GROUP_ID = "unassigned"
NO_PROJECT_GROUP_ID = "no-project"

EARLIEST = datetime.min.replace(tzinfo=UTC)


def sort_for_timeline(items: Iterable[WorkItem]) -> list[WorkItem]:
    """
    Order items by when they begin (start, else deadline).

    Undated items go last; the sort is stable.
    """

    def sort_key(item: WorkItem) -> tuple[bool, datetime]:
        begins = item.start or item.deadline
        return begins is None, begins or EARLIEST

    return sorted(items, key=sort_key)


class GroupAggregator:
    """Partitions items by assignee, project or status."""

    def __init__(
        self,
        unassigned_label: Optional[str] = None,
        no_project_label: Optional[str] = None,
    ):
        settings = get_settings()
        self.unassigned_label = unassigned_label or settings.UNASSIGNED_LABEL
        self.no_project_label = no_project_label or settings.NO_PROJECT_LABEL

    def group_items(
        self,
        items: Sequence[WorkItem],
        key: GroupBy | str,
        reference: Optional[ReferenceData] = None,
    ) -> list[ItemGroup]:
        """
        Split items into ordered, non-empty groups.

        Args:
            items: Work items in caller order (kept inside each group)
            key: Grouping dimension; unknown keys fall back to ASSIGNEE
            reference: Assignees and projects in canonical order

        Returns:
            Groups in display order

        Raises:
            DuplicateError: if reference data lists the same id twice
        """
        reference = reference or ReferenceData()
        group_by = resolve_group_by(key)
        if lookup_enum(GroupBy, key) is None:
            logger.warning(f"Unknown group key {key!r}, grouping by {group_by.value}")

        if group_by == GroupBy.STATUS:
            return self._group_by_status(items)
        if group_by == GroupBy.PROJECT:
            return self._group_by_reference(
                items,
                reference.projects,
                lambda item: item.project_id,
                NO_PROJECT_GROUP_ID,
                self.no_project_label,
            )
        return self._group_by_reference(
            items,
            reference.assignees,
            lambda item: item.assignee_id,
            UNASSIGNED_GROUP_ID,
            self.unassigned_label,
        )

    def _group_by_reference(
        self,
        items: Sequence[WorkItem],
        identities: Sequence[Identity],
        key_of: Callable[[WorkItem], Optional[str]],
        fallback_id: str,
        fallback_label: str,
    ) -> list[ItemGroup]:
        """One group per known identity with items, then a catch-all group."""
        buckets: dict[str, list[WorkItem]] = {}
        for identity in identities:
            if identity.id in buckets:
                raise DuplicateError(
                    f"Duplicate reference id: {identity.id}",
                    details={"id": identity.id},
                )
            buckets[identity.id] = []

        leftovers: list[WorkItem] = []
        for item in items:
            ref_id = key_of(item)
            if ref_id is not None and ref_id in buckets:
                buckets[ref_id].append(item)
            else:
                # Missing or unknown references share the catch-all row
                leftovers.append(item)

        groups = [
            ItemGroup(
                id=identity.id,
                label=identity.name,
                avatar=identity.avatar,
                items=tuple(buckets[identity.id]),
            )
            for identity in identities
            if buckets[identity.id]
        ]
        if leftovers:
            groups.append(ItemGroup(id=fallback_id, label=fallback_label, items=tuple(leftovers)))
        return groups

    def _group_by_status(self, items: Sequence[WorkItem]) -> list[ItemGroup]:
        """One group per status in canonical order; empty statuses are omitted."""
        groups: list[ItemGroup] = []
        for status in STATUS_ORDER:
            matching = tuple(item for item in items if item.status == status)
            if matching:
                groups.append(
                    ItemGroup(id=status.value, label=STATUS_LABELS[status], items=matching)
                )
        return groups
