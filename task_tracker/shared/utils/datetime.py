"""
UTC datetime helpers.

Every timestamp the store writes or returns is timezone-aware UTC.
"""

from datetime import UTC, datetime, timedelta

# Smallest step the database columns can represent.
_TIMESTAMP_RESOLUTION = timedelta(microseconds=1)


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Normalize a datetime to aware UTC.

    Naive values are taken to already be UTC (SQLite hands back naive
    datetimes; clients may omit the offset). Aware values are converted.

    Args:
        dt: A datetime that may be naive or aware, or None

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def next_timestamp_after(previous: datetime | None) -> datetime:
    """
    Return the current UTC time, bumped past previous if the clock has not moved.

    Used for updated_at so that every mutation yields a strictly later value.
    """
    now = utc_now()
    previous = ensure_utc(previous)
    if previous is not None and now <= previous:
        return previous + _TIMESTAMP_RESOLUTION
    return now
