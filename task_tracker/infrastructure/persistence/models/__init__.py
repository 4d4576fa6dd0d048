"""Persistence models: ORM entities and mixins."""

from task_tracker.infrastructure.persistence.models.mixins import (
    IdentityMixin,
    TimestampMixin,
)
from task_tracker.infrastructure.persistence.models.task import Task

__all__ = [
    "Task",
    "IdentityMixin",
    "TimestampMixin",
]
