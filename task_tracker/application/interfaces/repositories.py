"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from task_tracker.domain.enums import TaskStatus

if TYPE_CHECKING:
    from task_tracker.application.dtos.task import TaskPayload, TaskResult


class ITaskRepository(Protocol):
    """Protocol for task repository (DIP)."""

    async def create_task(self, payload: TaskPayload) -> TaskResult:
        """Insert a task; the store assigns id, created_at and updated_at."""

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        """Return task by id, or None."""

    async def list_tasks(self) -> list[TaskResult]:
        """Return all tasks, oldest created first (id breaks ties)."""

    async def exists(self, task_id: int) -> bool:
        """Return True if a task with this id exists."""

    async def update_status(
        self, task_id: int, status: TaskStatus
    ) -> TaskResult | None:
        """Set status only and refresh updated_at; None if the task does not exist."""

    async def update_task(
        self, task_id: int, payload: TaskPayload
    ) -> TaskResult | None:
        """Overwrite all mutable fields and refresh updated_at; None if missing."""

    async def delete_task(self, task_id: int) -> bool:
        """Hard-delete the task; return False if it did not exist."""
