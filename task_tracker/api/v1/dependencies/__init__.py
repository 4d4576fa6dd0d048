"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for use cases. Use cases are built from
infrastructure implementations here; routes depend only on these
dependencies, not on infrastructure directly.
"""

from task_tracker.api.v1.dependencies.task import (
    get_task_read_service,
    get_task_service,
)

__all__ = ["get_task_read_service", "get_task_service"]
