"""Datetime utilities with consistent UTC timezone handling.

All timestamps held by a todo are timezone-aware and in UTC. The store keeps
them as fixed-width ``YYYY-MM-DD HH:MM:SS`` strings, which drops sub-second
precision.
"""

from datetime import datetime, timezone
from typing import Optional


STORE_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_utc() -> datetime:
    """Return current datetime in UTC timezone.

    Returns:
        Current datetime with timezone=UTC
    """
    return datetime.now(timezone.utc)


def epoch_utc() -> datetime:
    """Return the Unix epoch in UTC.

    Used as the completion timestamp of todos that were never completed.
    """
    return datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """Ensure datetime is timezone-aware, assuming UTC if naive.

    Args:
        dt: Datetime to check/convert, or None

    Returns:
        Timezone-aware datetime in UTC, or None if input was None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume UTC
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def to_store_string(dt: datetime) -> str:
    """Format a datetime the way the store keeps it (UTC, second precision)."""
    return ensure_aware(dt).strftime(STORE_FORMAT)


def from_store_string(value: str) -> datetime:
    """Parse a store timestamp back into an aware UTC datetime.

    Raises:
        ValueError: If the string does not follow ``STORE_FORMAT``
    """
    parsed = datetime.strptime(value, STORE_FORMAT)
    return parsed.replace(tzinfo=timezone.utc)


def to_local(dt: datetime) -> datetime:
    """Convert an aware datetime to the local timezone for display."""
    return ensure_aware(dt).astimezone()
