"""Application ports (protocols implemented by infrastructure)."""

from task_tracker.application.interfaces.repositories import ITaskRepository

__all__ = ["ITaskRepository"]
