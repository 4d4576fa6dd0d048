"""Task operations: create, get, list, update status, update, delete (delegate to ITaskRepository)."""

from __future__ import annotations

import logging

from task_tracker.application.dtos.task import TaskPayload, TaskResult
from task_tracker.application.interfaces.repositories import ITaskRepository
from task_tracker.domain.enums import TaskStatus
from task_tracker.domain.exceptions import (
    InvalidArgumentException,
    TaskNotFoundException,
)

logger = logging.getLogger(__name__)

# Task ids are 64-bit signed integers in the store.
MIN_TASK_ID = -(2**63)
MAX_TASK_ID = 2**63 - 1


class TaskService:
    """Create, query, update and delete tasks.

    Payloads are validated before they get here (see task_validator). Each
    method runs inside the session the repository was built with, so one call
    is one transaction. Raises TaskNotFoundException for unknown ids.
    """

    def __init__(self, task_repo: ITaskRepository) -> None:
        self.task_repo = task_repo

    @staticmethod
    def _check_id(task_id: int) -> None:
        """Reject ids the store cannot represent (they cannot exist)."""
        if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
            raise InvalidArgumentException(
                f"Task id {task_id} is outside the supported range"
            )

    async def create_task(self, payload: TaskPayload) -> TaskResult:
        """Create a task; the store assigns id and timestamps."""
        created = await self.task_repo.create_task(payload)
        logger.info("Task created successfully with id %s", created.id)
        return created

    async def get_task(self, task_id: int) -> TaskResult:
        """Return the task with this id; else raise TaskNotFoundException."""
        self._check_id(task_id)
        task = await self.task_repo.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundException(task_id)
        return task

    async def list_tasks(self) -> list[TaskResult]:
        """Return all tasks in creation order (oldest first)."""
        return await self.task_repo.list_tasks()

    async def update_task_status(
        self, task_id: int, status: TaskStatus
    ) -> TaskResult:
        """Change only the status of a task; raise TaskNotFoundException if missing."""
        self._check_id(task_id)
        updated = await self.task_repo.update_status(task_id, status)
        if updated is None:
            raise TaskNotFoundException(task_id)
        logger.info("Task %s status updated to: %s", task_id, status.value)
        return updated

    async def update_task(self, task_id: int, payload: TaskPayload) -> TaskResult:
        """Overwrite title, description, status and due date; raise if missing."""
        self._check_id(task_id)
        updated = await self.task_repo.update_task(task_id, payload)
        if updated is None:
            raise TaskNotFoundException(task_id)
        logger.info("Task %s updated", task_id)
        return updated

    async def delete_task(self, task_id: int) -> None:
        """Delete the task; raise TaskNotFoundException if it does not exist."""
        self._check_id(task_id)
        if not await self.task_repo.exists(task_id):
            raise TaskNotFoundException(task_id)
        await self.task_repo.delete_task(task_id)
        logger.info("Task %s deleted", task_id)
