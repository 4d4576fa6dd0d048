"""Tests for translate_exception (failure kind -> problem detail)."""

from datetime import timedelta

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_tracker.core.exception_handlers import (
    GENERIC_ERROR_DETAIL,
    PROBLEM_MEDIA_TYPE,
    problem_response,
    translate_exception,
)
from task_tracker.domain.exceptions import (
    InvalidArgumentException,
    InvalidParameterException,
    TaskNotFoundException,
    TaskTrackerException,
    ValidationException,
)
from task_tracker.shared.utils.datetime import utc_now


def test_task_not_found() -> None:
    problem = translate_exception(TaskNotFoundException(12))
    assert problem.status == 404
    assert problem.title == "Task Not Found"
    assert problem.detail == "Task not found with id: 12"
    assert problem.errors is None


def test_validation_exception_carries_field_errors() -> None:
    problem = translate_exception(ValidationException({"title": "The task title is required."}))
    assert problem.status == 400
    assert problem.title == "Validation Error"
    assert problem.detail == "Validation failed"
    assert problem.errors == {"title": "The task title is required."}


def test_invalid_parameter() -> None:
    problem = translate_exception(InvalidParameterException("status", "DONE"))
    assert problem.status == 400
    assert problem.title == "Invalid Parameter"
    assert problem.detail == "Invalid value 'DONE' for parameter 'status'"


def test_invalid_argument() -> None:
    problem = translate_exception(InvalidArgumentException("bad id"))
    assert problem.status == 400
    assert problem.title == "Invalid Request"
    assert problem.detail == "bad id"


@pytest.mark.parametrize(
    "exc",
    [
        RuntimeError("database password is hunter2"),
        KeyError("secret"),
        TaskTrackerException("unmapped domain error"),
    ],
)
def test_unexpected_failures_are_generic(exc: Exception) -> None:
    problem = translate_exception(exc)
    assert problem.status == 500
    assert problem.title == "Internal Server Error"
    assert problem.detail == GENERIC_ERROR_DETAIL


def test_timestamp_is_set_at_translation_time() -> None:
    before = utc_now()
    problem = translate_exception(TaskNotFoundException(1))
    assert before <= problem.timestamp <= utc_now() + timedelta(seconds=1)


def test_body_parse_errors_become_field_errors() -> None:
    exc = RequestValidationError(
        [
            {
                "type": "string_type",
                "loc": ("body", "title"),
                "msg": "Input should be a valid string",
                "input": 5,
            },
            {
                "type": "datetime_from_date_parsing",
                "loc": ("body", "dueDateTime"),
                "msg": "Input should be a valid datetime",
                "input": "tomorrow",
            },
        ]
    )
    problem = translate_exception(exc)
    assert problem.status == 400
    assert problem.title == "Validation Error"
    assert problem.errors == {
        "title": "Input should be a valid string",
        "dueDateTime": "Input should be a valid datetime",
    }


def test_malformed_json_is_a_body_error() -> None:
    exc = RequestValidationError(
        [{"type": "json_invalid", "loc": ("body", 9), "msg": "JSON decode error", "input": {}}]
    )
    problem = translate_exception(exc)
    assert problem.title == "Validation Error"
    assert problem.errors == {"body": "Malformed JSON request body"}


def test_missing_query_parameter_is_a_validation_error() -> None:
    exc = RequestValidationError(
        [{"type": "missing", "loc": ("query", "status"), "msg": "Field required", "input": None}]
    )
    problem = translate_exception(exc)
    assert problem.title == "Validation Error"
    assert problem.errors == {"status": "Field required"}


def test_unparseable_path_parameter_is_invalid_parameter() -> None:
    exc = RequestValidationError(
        [
            {
                "type": "int_parsing",
                "loc": ("path", "id"),
                "msg": "Input should be a valid integer",
                "input": "abc",
            }
        ]
    )
    problem = translate_exception(exc)
    assert problem.status == 400
    assert problem.title == "Invalid Parameter"
    assert problem.detail == "Invalid value 'abc' for parameter 'id'"


def test_starlette_http_exception_keeps_status() -> None:
    problem = translate_exception(StarletteHTTPException(status_code=405, detail="Method Not Allowed"))
    assert problem.status == 405
    assert problem.title == "Method Not Allowed"
    assert problem.detail == "Method Not Allowed"


def test_problem_response_serialization() -> None:
    response = problem_response(translate_exception(TaskNotFoundException(3)))
    assert response.status_code == 404
    assert response.media_type == PROBLEM_MEDIA_TYPE
    assert b'"errors"' not in response.body
    assert b'"title":"Task Not Found"' in response.body
