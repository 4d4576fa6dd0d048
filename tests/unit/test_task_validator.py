"""Tests for task payload validation (runs before the service is called)."""

from datetime import datetime, timedelta, timezone

import pytest

from task_tracker.application.services.task_validator import (
    STATUS_REQUIRED_MESSAGE,
    TITLE_MAX_LENGTH,
    TITLE_REQUIRED_MESSAGE,
    TITLE_TOO_LONG_MESSAGE,
    FieldError,
    collect_field_errors,
    parse_status,
    validate_task_payload,
)
from task_tracker.domain.enums import TaskStatus
from task_tracker.domain.exceptions import (
    InvalidParameterException,
    ValidationException,
)


class TestParseStatus:
    """Tests for parse_status."""

    @pytest.mark.parametrize("raw", TaskStatus.values())
    def test_known_values(self, raw: str) -> None:
        assert parse_status(raw) == TaskStatus(raw)

    def test_enum_passes_through(self) -> None:
        assert parse_status(TaskStatus.COMPLETED) is TaskStatus.COMPLETED

    def test_unknown_value_raises_invalid_parameter(self) -> None:
        with pytest.raises(InvalidParameterException) as exc_info:
            parse_status("DONE")
        assert exc_info.value.name == "status"
        assert exc_info.value.value == "DONE"
        assert exc_info.value.message == "Invalid value 'DONE' for parameter 'status'"

    def test_match_is_case_sensitive(self) -> None:
        with pytest.raises(InvalidParameterException):
            parse_status("todo")

    def test_custom_parameter_name(self) -> None:
        with pytest.raises(InvalidParameterException) as exc_info:
            parse_status("nope", parameter="newStatus")
        assert exc_info.value.name == "newStatus"

    @pytest.mark.parametrize("raw", [7, True, 1.5, ["TODO"], {"name": "TODO"}])
    def test_non_string_value_raises_invalid_parameter(self, raw: object) -> None:
        with pytest.raises(InvalidParameterException) as exc_info:
            parse_status(raw)
        assert exc_info.value.value == raw


class TestCollectFieldErrors:
    """Tests for collect_field_errors."""

    def test_valid(self) -> None:
        assert collect_field_errors("Write report", TaskStatus.TODO) == []

    @pytest.mark.parametrize("title", [None, "", "   ", "\t\n"])
    def test_missing_or_blank_title(self, title: str | None) -> None:
        assert collect_field_errors(title, TaskStatus.TODO) == [
            FieldError("title", TITLE_REQUIRED_MESSAGE)
        ]

    def test_title_at_max_length_is_valid(self) -> None:
        assert collect_field_errors("x" * TITLE_MAX_LENGTH, TaskStatus.TODO) == []

    def test_title_too_long(self) -> None:
        assert collect_field_errors("x" * (TITLE_MAX_LENGTH + 1), TaskStatus.TODO) == [
            FieldError("title", TITLE_TOO_LONG_MESSAGE)
        ]

    def test_missing_status(self) -> None:
        assert collect_field_errors("Write report", None) == [
            FieldError("status", STATUS_REQUIRED_MESSAGE)
        ]

    def test_reports_all_fields(self) -> None:
        errors = collect_field_errors("", None)
        assert {e.field for e in errors} == {"title", "status"}


class TestValidateTaskPayload:
    """Tests for validate_task_payload."""

    def test_builds_payload(self) -> None:
        due = datetime(2024, 12, 31, 17, 0, tzinfo=timezone.utc)
        payload = validate_task_payload("Review case documents", "notes", "IN_PROGRESS", due)
        assert payload.title == "Review case documents"
        assert payload.description == "notes"
        assert payload.status is TaskStatus.IN_PROGRESS
        assert payload.due_date_time == due

    def test_optional_fields_default_to_none(self) -> None:
        payload = validate_task_payload("Title", None, "TODO", None)
        assert payload.description is None
        assert payload.due_date_time is None

    def test_naive_due_date_is_taken_as_utc(self) -> None:
        payload = validate_task_payload("Title", None, "TODO", datetime(2024, 1, 1, 9, 30))
        assert payload.due_date_time == datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)

    def test_offset_due_date_is_converted_to_utc(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        payload = validate_task_payload(
            "Title", None, "TODO", datetime(2024, 1, 1, 11, 0, tzinfo=plus_two)
        )
        assert payload.due_date_time == datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
        assert payload.due_date_time.utcoffset() == timedelta(0)

    def test_past_due_date_is_accepted(self) -> None:
        past = datetime(2000, 1, 1, tzinfo=timezone.utc)
        assert validate_task_payload("Title", None, "TODO", past).due_date_time == past

    def test_field_errors_raise_validation_exception(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            validate_task_payload(" ", None, None, None)
        assert exc_info.value.field_errors == {
            "title": TITLE_REQUIRED_MESSAGE,
            "status": STATUS_REQUIRED_MESSAGE,
        }

    def test_unknown_status_is_reported_before_field_errors(self) -> None:
        with pytest.raises(InvalidParameterException) as exc_info:
            validate_task_payload("", None, "ARCHIVED", None)
        assert exc_info.value.name == "status"
        assert exc_info.value.value == "ARCHIVED"
