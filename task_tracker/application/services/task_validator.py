"""Task payload validation.

Runs before any service call so that invalid payloads never reach the store.
All functions are pure: they either return validated values or raise a
domain exception describing every problem found.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from task_tracker.application.dtos.task import TaskPayload
from task_tracker.domain.enums import TaskStatus
from task_tracker.domain.exceptions import InvalidParameterException, ValidationException
from task_tracker.shared.utils.datetime import ensure_utc

TITLE_MAX_LENGTH = 255

TITLE_REQUIRED_MESSAGE = "The task title is required."
TITLE_TOO_LONG_MESSAGE = f"The task title must be at most {TITLE_MAX_LENGTH} characters."
STATUS_REQUIRED_MESSAGE = (
    "Task status must be one of TODO, IN_PROGRESS, COMPLETED, OR CANCELLED"
)


@dataclass(frozen=True)
class FieldError:
    """A single failed constraint on a named field."""

    field: str
    message: str


def parse_status(raw: Any, parameter: str = "status") -> TaskStatus:
    """Convert a raw status value to TaskStatus.

    Matching is exact and case-sensitive on the enum name.

    Raises:
        InvalidParameterException: If raw is not one of the four status names.
    """
    if isinstance(raw, TaskStatus):
        return raw
    try:
        return TaskStatus(raw)
    except (ValueError, TypeError):
        raise InvalidParameterException(parameter, raw) from None


def collect_field_errors(title: str | None, status: Any) -> list[FieldError]:
    """Return the field errors for a create/update payload (empty when valid)."""
    errors: list[FieldError] = []
    if title is None or not title.strip():
        errors.append(FieldError("title", TITLE_REQUIRED_MESSAGE))
    elif len(title) > TITLE_MAX_LENGTH:
        errors.append(FieldError("title", TITLE_TOO_LONG_MESSAGE))
    if status is None:
        errors.append(FieldError("status", STATUS_REQUIRED_MESSAGE))
    return errors


def validate_task_payload(
    title: str | None,
    description: str | None,
    status: Any,
    due_date_time: datetime | None,
) -> TaskPayload:
    """Validate raw request fields and build a TaskPayload.

    A status that is present but unknown is a parameter-type failure and is
    reported before field constraints are checked.

    Raises:
        InvalidParameterException: status present but not a TaskStatus name.
        ValidationException: title missing/blank/too long or status missing.
    """
    parsed_status = parse_status(status) if status is not None else None
    errors = collect_field_errors(title, parsed_status)
    if errors:
        raise ValidationException({e.field: e.message for e in errors})
    return TaskPayload(
        title=title,  # type: ignore[arg-type]
        description=description,
        status=parsed_status,  # type: ignore[arg-type]
        due_date_time=ensure_utc(due_date_time),
    )
