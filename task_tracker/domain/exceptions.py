"""Domain exceptions for the task tracker.

Defines the failure kinds the application can signal. These exceptions are
independent of HTTP; the presentation layer maps them to problem-detail
responses in app exception handlers.
"""

from typing import Any


class TaskTrackerException(Exception):
    """Base exception for all task tracker errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. task_id, field errors).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class TaskNotFoundException(TaskTrackerException):
    """Raised when no task exists with the requested id."""

    def __init__(self, task_id: int) -> None:
        """Initialize with the missing task id.

        Args:
            task_id: The task id that was not found.
        """
        self.task_id = task_id
        super().__init__(
            f"Task not found with id: {task_id}",
            "TASK_NOT_FOUND",
            {"task_id": task_id},
        )


class ValidationException(TaskTrackerException):
    """Raised when a request payload fails field validation.

    Carries every failing field at once so the caller can fix them together.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        """Initialize with a mapping of field name to message.

        Args:
            field_errors: Field name -> validation message.
        """
        self.field_errors = dict(field_errors)
        super().__init__(
            "Validation failed",
            "VALIDATION_ERROR",
            {"errors": self.field_errors},
        )


class InvalidParameterException(TaskTrackerException):
    """Raised when a parameter value cannot be converted to its declared type."""

    def __init__(self, name: str, value: Any) -> None:
        """Initialize with the parameter name and the offending raw value.

        Args:
            name: Parameter name (e.g. 'status', 'id').
            value: The raw value as supplied by the caller.
        """
        self.name = name
        self.value = value
        super().__init__(
            f"Invalid value '{value}' for parameter '{name}'",
            "INVALID_PARAMETER",
            {"name": name, "value": value},
        )


class InvalidArgumentException(TaskTrackerException):
    """Raised when a caller-supplied argument is unusable (e.g. out of range)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "INVALID_ARGUMENT")

