"""Centralized exception handlers for the FastAPI app.

translate_exception() maps every failure kind to a ProblemDetail;
register_exception_handlers(app) installs it for domain exceptions, request
parsing errors, Starlette HTTP errors and anything unhandled. All error
responses share one body shape and the application/problem+json media type.
"""

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_tracker.domain.exceptions import (
    InvalidArgumentException,
    InvalidParameterException,
    TaskNotFoundException,
    TaskTrackerException,
    ValidationException,
)
from task_tracker.schemas.problem import ProblemDetail
from task_tracker.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"
GENERIC_ERROR_DETAIL = "An unexpected error occurred"
VALIDATION_FAILED_DETAIL = "Validation failed"

# Leading loc segments FastAPI adds to say where a value came from.
_LOC_SOURCES = {"body", "query", "path", "header", "cookie"}


def _problem(
    status: int, title: str, detail: str, errors: dict[str, str] | None = None
) -> ProblemDetail:
    return ProblemDetail(
        status=status,
        title=title,
        detail=detail,
        timestamp=utc_now(),
        errors=errors,
    )


def _field_name(loc: tuple[Any, ...]) -> str:
    """Turn a pydantic error location into a field name (e.g. ('body', 'title') -> 'title')."""
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in _LOC_SOURCES:
        parts = parts[1:]
    return ".".join(parts) or "request"


def _translate_request_validation(exc: RequestValidationError) -> ProblemDetail:
    """Map framework parsing errors.

    A present but unconvertible path/query value (e.g. /tasks/abc) is an
    invalid parameter; everything else is reported per field.
    """
    errors = exc.errors()
    for err in errors:
        loc = tuple(err.get("loc", ()))
        if len(loc) >= 2 and loc[0] in ("path", "query") and err.get("type") != "missing":
            bad = InvalidParameterException(str(loc[-1]), err.get("input"))
            return _problem(400, "Invalid Parameter", bad.message)

    field_errors: dict[str, str] = {}
    for err in errors:
        if err.get("type") == "json_invalid":
            field_errors.setdefault("body", "Malformed JSON request body")
            continue
        field_errors.setdefault(_field_name(tuple(err.get("loc", ()))), err.get("msg", ""))
    return _problem(400, "Validation Error", VALIDATION_FAILED_DETAIL, field_errors)


def translate_exception(exc: Exception) -> ProblemDetail:
    """Return the problem detail for any exception raised while handling a request.

    Unknown exception types become a 500 with a fixed message; their details
    are never included in the response.
    """
    if isinstance(exc, TaskNotFoundException):
        return _problem(404, "Task Not Found", exc.message)
    if isinstance(exc, ValidationException):
        return _problem(400, "Validation Error", exc.message, exc.field_errors)
    if isinstance(exc, InvalidParameterException):
        return _problem(400, "Invalid Parameter", exc.message)
    if isinstance(exc, InvalidArgumentException):
        return _problem(400, "Invalid Request", exc.message)
    if isinstance(exc, RequestValidationError):
        return _translate_request_validation(exc)
    if isinstance(exc, StarletteHTTPException):
        try:
            title = HTTPStatus(exc.status_code).phrase
        except ValueError:
            title = "HTTP Error"
        return _problem(exc.status_code, title, str(exc.detail))
    return _problem(500, "Internal Server Error", GENERIC_ERROR_DETAIL)


def problem_response(
    problem: ProblemDetail, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Serialize a ProblemDetail as an application/problem+json response."""
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(mode="json", exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


def _task_tracker_exception_handler(
    request: Request, exc: TaskTrackerException
) -> JSONResponse:
    """Return problem detail for domain exceptions."""
    logger.debug("%s %s -> %s: %s", request.method, request.url.path, exc.error_code, exc.message)
    return problem_response(translate_exception(exc))


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 problem detail for request parsing failures."""
    return problem_response(translate_exception(exc))


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return problem detail for Starlette HTTP exceptions (404 route, 405 method)."""
    return problem_response(translate_exception(exc), headers=exc.headers)


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500 with a fixed detail; the exception is only logged."""
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    return problem_response(translate_exception(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TaskTrackerException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(TaskTrackerException, _task_tracker_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
