"""Application use cases."""

from task_tracker.application.use_cases.tasks import TaskService

__all__ = ["TaskService"]
