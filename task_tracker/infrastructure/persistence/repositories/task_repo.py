"""Task repository: SQLAlchemy implementation of ITaskRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from task_tracker.application.dtos.task import TaskPayload, TaskResult
from task_tracker.domain.enums import TaskStatus
from task_tracker.infrastructure.persistence.models.task import Task
from task_tracker.infrastructure.persistence.repositories.base import BaseRepository
from task_tracker.shared.utils.datetime import (
    ensure_utc,
    next_timestamp_after,
    utc_now,
)


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO (timestamps normalized to UTC)."""
    return TaskResult(
        id=t.id,
        title=t.title,
        description=t.description,
        status=t.status,
        due_date_time=ensure_utc(t.due_date_time),
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository.

    Timestamps are written here, at the moment of the write: created_at and
    updated_at share one value on insert, and updated_at moves strictly
    forward on every mutation.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def create_task(self, payload: TaskPayload) -> TaskResult:
        """Insert a task and return the result DTO."""
        now = utc_now()
        task = Task(
            title=payload.title,
            description=payload.description,
            status=payload.status,
            due_date_time=payload.due_date_time,
            created_at=now,
            updated_at=now,
        )
        return _to_result(await self._add(task))

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        task = await self._get(task_id)
        return _to_result(task) if task else None

    async def list_tasks(self) -> list[TaskResult]:
        """Return all tasks by created_at ascending, id ascending on ties."""
        result = await self.db.execute(
            select(Task).order_by(Task.created_at.asc(), Task.id.asc())
        )
        return [_to_result(t) for t in result.scalars().all()]

    async def update_status(
        self, task_id: int, status: TaskStatus
    ) -> TaskResult | None:
        """Set status only; None if the task does not exist."""
        task = await self._get(task_id)
        if task is None:
            return None
        task.status = status
        task.updated_at = next_timestamp_after(task.updated_at)
        return _to_result(await self._save(task))

    async def update_task(
        self, task_id: int, payload: TaskPayload
    ) -> TaskResult | None:
        """Overwrite title, description, status and due date; None if missing."""
        task = await self._get(task_id)
        if task is None:
            return None
        task.title = payload.title
        task.description = payload.description
        task.status = payload.status
        task.due_date_time = payload.due_date_time
        task.updated_at = next_timestamp_after(task.updated_at)
        return _to_result(await self._save(task))

    async def delete_task(self, task_id: int) -> bool:
        """Hard-delete the task; False if it did not exist."""
        task = await self._get(task_id)
        if task is None:
            return False
        await self._delete(task)
        return True
