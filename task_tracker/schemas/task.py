"""Task API schemas.

Field names are camelCase on the wire (dueDateTime, createdAt, updatedAt) and
snake_case in Python.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from task_tracker.application.dtos.task import TaskResult
from task_tracker.domain.enums import TaskStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskRequest(_CamelModel):
    """Request body for creating or fully updating a task.

    Constraints (title required and 1-255 chars, status required and one of
    the TaskStatus names) are checked by task_validator rather than here, so
    every failure is reported through the same problem-detail shape.
    """

    title: str | None = Field(
        default=None,
        description="The title of the task",
        examples=["Review case documents"],
    )
    description: str | None = Field(
        default=None,
        description="Detailed description of the task",
        examples=["Review all submitted documents for case #12345"],
    )
    # Any JSON value: anything but a status name is reported as an invalid parameter.
    status: Any = Field(
        default=None,
        description="Current status of the task",
        examples=[TaskStatus.TODO.value],
        json_schema_extra={"enum": TaskStatus.values()},
    )
    due_date_time: datetime | None = Field(
        default=None,
        description="Due date and time for the task (UTC when no offset is given)",
        examples=["2024-12-31T17:00:00Z"],
    )


class TaskResponse(_CamelModel):
    """Task as returned by every task endpoint."""

    id: int = Field(..., examples=[1])
    title: str
    description: str | None = None
    status: TaskStatus
    due_date_time: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_result(cls, result: TaskResult) -> "TaskResponse":
        """Build the response from the service DTO."""
        return cls(
            id=result.id,
            title=result.title,
            description=result.description,
            status=result.status,
            due_date_time=result.due_date_time,
            created_at=result.created_at,
            updated_at=result.updated_at,
        )
