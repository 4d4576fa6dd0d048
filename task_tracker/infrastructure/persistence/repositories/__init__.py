"""Persistence repositories. Re-exports for dependency injection."""

from task_tracker.infrastructure.persistence.repositories.base import BaseRepository
from task_tracker.infrastructure.persistence.repositories.task_repo import (
    TaskRepository,
)

__all__ = [
    "BaseRepository",
    "TaskRepository",
]
