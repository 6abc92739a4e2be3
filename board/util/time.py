"""Relative time formatting."""

from datetime import datetime, timezone
from typing import Optional

# Differences within this many seconds of now read as "just now"
JUST_NOW_SECONDS = 5

_UNITS = (
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


def format_time_ago(value: datetime | str | None, now: Optional[datetime] = None) -> str:
    """Format a timestamp relative to now.

    Examples: ``just now``, ``3 minutes ago``, ``in 2 hours``. Unparseable
    input yields an empty string. Naive datetimes are taken as UTC.

    Args:
        value: Timestamp or ISO 8601 string
        now: Reference time, defaults to the current time
    """
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff = (now - value).total_seconds()
    if abs(diff) <= JUST_NOW_SECONDS:
        return "just now"

    seconds = abs(diff)
    for unit, size in _UNITS:
        if seconds >= size:
            count = int(seconds // size)
            break
    label = f"{count} {unit}{'' if count == 1 else 's'}"
    return f"{label} ago" if diff > 0 else f"in {label}"
