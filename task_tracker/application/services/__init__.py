"""Application services: validation helpers used before use cases run."""

from task_tracker.application.services.task_validator import (
    FieldError,
    collect_field_errors,
    parse_status,
    validate_task_payload,
)

__all__ = [
    "FieldError",
    "collect_field_errors",
    "parse_status",
    "validate_task_payload",
]
