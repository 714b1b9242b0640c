"""
Domain time utilities (pure).

Centralized timestamp validation and rendering helpers.

Behavior and error messages must remain consistent across the domain model.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def require_utc_timestamp(name: str, value: datetime) -> None:
    """
    Enforces that timestamps stamped on a lead are UTC.

    Invariants:
    - Timestamps must be timezone-aware.
    - Timestamps must have UTC offset 0.
    """

    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware (UTC)")
    if value.utcoffset() != timedelta(0):
        raise ValueError(f"{name} must be a UTC timestamp (offset 0)")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso8601(name: str, value: datetime) -> str:
    """
    Render a UTC timestamp as ISO-8601 with millisecond precision and a `Z` suffix.

    Example:
        2025-01-01T12:00:00.000Z
    """

    require_utc_timestamp(name, value)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
