"""Tests for domain exceptions (error_code, message, details)."""

from task_tracker.domain.exceptions import (
    InvalidArgumentException,
    InvalidParameterException,
    TaskNotFoundException,
    TaskTrackerException,
    ValidationException,
)


def test_task_tracker_exception_default_error_code() -> None:
    """Base TaskTrackerException uses class name as error_code when not provided."""
    exc = TaskTrackerException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TaskTrackerException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_task_tracker_exception_custom_error_code_and_details() -> None:
    exc = TaskTrackerException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}


def test_task_not_found_exception() -> None:
    exc = TaskNotFoundException(42)
    assert exc.message == "Task not found with id: 42"
    assert exc.error_code == "TASK_NOT_FOUND"
    assert exc.task_id == 42
    assert exc.details == {"task_id": 42}


def test_validation_exception() -> None:
    """ValidationException carries every field error."""
    exc = ValidationException({"title": "required", "status": "required"})
    assert exc.message == "Validation failed"
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.field_errors == {"title": "required", "status": "required"}
    assert exc.details == {"errors": exc.field_errors}


def test_validation_exception_copies_input() -> None:
    errors = {"title": "required"}
    exc = ValidationException(errors)
    errors["status"] = "required"
    assert exc.field_errors == {"title": "required"}


def test_invalid_parameter_exception() -> None:
    exc = InvalidParameterException("status", "DONE")
    assert exc.message == "Invalid value 'DONE' for parameter 'status'"
    assert exc.error_code == "INVALID_PARAMETER"
    assert exc.details == {"name": "status", "value": "DONE"}


def test_invalid_argument_exception() -> None:
    exc = InvalidArgumentException("Task id is out of range")
    assert exc.message == "Task id is out of range"
    assert exc.error_code == "INVALID_ARGUMENT"
