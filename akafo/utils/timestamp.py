"""Timestamp conversion and formatting utilities."""

import calendar
import time
from datetime import date, datetime, timezone
from typing import Optional


def from_struct_time(parsed: Optional[time.struct_time]) -> Optional[datetime]:
    """
    Convert a UTC struct_time (as produced by feedparser) to an aware datetime.

    Args:
        parsed: struct_time in UTC, or None

    Returns:
        Timezone-aware UTC datetime, or None if no value was given

    Examples:
        from_struct_time(time.strptime("2023-01-15T08:00:00", "%Y-%m-%dT%H:%M:%S"))
        # datetime(2023, 1, 15, 8, 0, tzinfo=timezone.utc)
    """
    if parsed is None:
        return None
    return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)


def format_date(day: date) -> str:
    """Format a date the way German menus print it (DD.MM.YYYY)."""
    return day.strftime("%d.%m.%Y")


def now() -> str:
    """Local time as a sortable session stamp, e.g. '20230115_081500'."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
