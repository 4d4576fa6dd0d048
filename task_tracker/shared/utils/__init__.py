"""Shared utilities: datetime."""

from task_tracker.shared.utils.datetime import (
    ensure_utc,
    next_timestamp_after,
    utc_now,
)

__all__ = ["ensure_utc", "next_timestamp_after", "utc_now"]
