"""Calendar helpers shared by pricing and promotion selection."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.config import get_settings


def _resolve_timezone(name: str | None) -> ZoneInfo:
    try:
        return ZoneInfo(name or "UTC")
    except ZoneInfoNotFoundError:
        return ZoneInfo("UTC")


def today(tz_name: str | None = None) -> date:
    """Return the current calendar date at the property."""
    tz = _resolve_timezone(tz_name or get_settings().property_timezone)
    return datetime.now(UTC).astimezone(tz).date()


def each_day(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        if current == end:
            return
        current += timedelta(days=1)


def weekday_index(day: date) -> int:
    """Day of week with Sunday as 0 and Saturday as 6."""
    return (day.weekday() + 1) % 7


def day_key(day: date) -> str:
    return day.isoformat()


__all__ = ["today", "each_day", "weekday_index", "day_key"]
