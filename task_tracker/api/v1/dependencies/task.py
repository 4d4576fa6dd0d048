"""Task dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from task_tracker.application.use_cases.tasks import TaskService
from task_tracker.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from task_tracker.infrastructure.persistence.repositories import TaskRepository


async def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskService:
    """Task service for create/update/delete (one transaction per request)."""
    return TaskService(TaskRepository(db))


async def get_task_read_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskService:
    """Task service for get/list (no commit)."""
    return TaskService(TaskRepository(db))
