"""Application DTOs: plain data passed between layers."""

from task_tracker.application.dtos.task import TaskPayload, TaskResult

__all__ = ["TaskPayload", "TaskResult"]
