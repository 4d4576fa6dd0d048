"""DTOs for tasks (no dependency on ORM or HTTP schemas)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from task_tracker.domain.enums import TaskStatus


@dataclass(frozen=True)
class TaskPayload:
    """Validated fields for creating or fully updating a task."""

    title: str
    status: TaskStatus
    description: str | None = None
    due_date_time: datetime | None = None


@dataclass(frozen=True)
class TaskResult:
    """Task as persisted by the store."""

    id: int
    title: str
    description: str | None
    status: TaskStatus
    due_date_time: datetime | None
    created_at: datetime
    updated_at: datetime
