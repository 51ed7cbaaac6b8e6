"""
Timezone-aware datetime utilities.

Work items carry UTC instants while the timeline is drawn in calendar days of
a viewer's timezone. These helpers keep the conversion in one place.
"""

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

# UTC timezone constant
UTC = timezone.utc

ONE_DAY = timedelta(days=1)
ONE_HOUR = timedelta(hours=1)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure datetime is timezone-aware and in UTC.

    Args:
        dt: datetime to convert (can be None, naive, or timezone-aware)

    Returns:
        Optional[datetime]: UTC timezone-aware datetime, or None if input is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume UTC
        return dt.replace(tzinfo=UTC)

    # Already timezone-aware - convert to UTC
    return dt.astimezone(UTC)


def local_date(value: date | datetime, tz_name: str) -> date:
    """
    Get the calendar date of an instant in the given timezone.

    Plain dates are returned unchanged. Naive datetimes are wall-clock time
    in ``tz_name``.

    Example:
        >>> local_date(datetime(2024, 1, 19, 23, 0, tzinfo=UTC), "Asia/Tokyo")
        date(2024, 1, 20)
    """
    if isinstance(value, datetime):
        zone = ZoneInfo(tz_name)
        if value.tzinfo is None:
            return value.replace(tzinfo=zone).date()
        return value.astimezone(zone).date()
    return value


def day_start_utc(day: date, tz_name: str) -> datetime:
    """Local midnight of ``day`` in ``tz_name``, expressed in UTC."""
    local_midnight = datetime.combine(day, time.min, tzinfo=ZoneInfo(tz_name))
    return local_midnight.astimezone(UTC)


def add_months(day: date, months: int) -> date:
    """
    Move a date by whole calendar months.

    The day of month is clamped to the target month's length
    (Jan 31 + 1 month = Feb 28/29).
    """
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))
