"""
Time window service.

Builds the run of calendar days a timeline view shows and moves the view
anchor backwards/forwards.
"""

from datetime import date, datetime, timedelta
from typing import Optional

from timeline_layout.core.config import get_settings
from timeline_layout.core.logger import setup_logger
from timeline_layout.models.enums import ViewKind
from timeline_layout.models.timeline import TimeWindow
from timeline_layout.models.view import lookup_enum, resolve_view_kind
from timeline_layout.utils.datetime_utils import add_months, local_date

logger = setup_logger(__name__)

WEEK_DAYS = 7


class TimeWindowCalculator:
    """
    Service for computing the visible day window.

    - WEEK / TWO_WEEKS start on the Monday of the anchor's ISO week
    - MONTH starts on the 1st and always spans ``month_days`` days
    """

    def __init__(
        self,
        month_days: Optional[int] = None,
        timezone: Optional[str] = None,
    ):
        settings = get_settings()
        self.month_days = month_days or settings.MONTH_WINDOW_DAYS
        self.timezone = timezone or settings.TIMEZONE

    def window_length(self, kind: ViewKind) -> int:
        """Number of days shown for a view kind."""
        if kind == ViewKind.TWO_WEEKS:
            return 2 * WEEK_DAYS
        if kind == ViewKind.MONTH:
            return self.month_days
        return WEEK_DAYS

    def compute_window(
        self,
        anchor: datetime | date,
        kind: ViewKind | str,
        timezone: Optional[str] = None,
    ) -> TimeWindow:
        """
        Compute the window containing ``anchor``.

        Args:
            anchor: Any instant (or calendar date) inside the wanted window
            kind: View kind; unknown values fall back to WEEK
            timezone: IANA timezone deciding the anchor's calendar day

        Returns:
            TimeWindow with consecutive days
        """
        resolved = resolve_view_kind(kind)
        if lookup_enum(ViewKind, kind) is None:
            logger.warning(f"Unknown view kind {kind!r}, using {resolved.value}")

        tz_name = timezone or self.timezone
        anchor_day = local_date(anchor, tz_name)

        if resolved == ViewKind.MONTH:
            first = anchor_day.replace(day=1)
        else:
            # weekday() is 0 for Monday, so Sunday (6) stays in the week it ends
            first = anchor_day - timedelta(days=anchor_day.weekday())

        length = self.window_length(resolved)
        days = tuple(first + timedelta(days=offset) for offset in range(length))
        return TimeWindow(days=days, timezone=tz_name)

    def shift_anchor(
        self, anchor: datetime | date, kind: ViewKind | str, direction: int
    ) -> datetime | date:
        """
        Move the anchor by ``direction`` navigation steps.

        WEEK and TWO_WEEKS step one week at a time; MONTH steps a calendar
        month (day of month clamped). The anchor keeps its type and time of day.
        """
        resolved = resolve_view_kind(kind)
        if resolved == ViewKind.MONTH:
            if isinstance(anchor, datetime):
                target = add_months(anchor.date(), direction)
                return datetime.combine(target, anchor.timetz())
            return add_months(anchor, direction)
        return anchor + timedelta(days=WEEK_DAYS * direction)
