"""Task input validation.

Each function checks one field of a create or update request and returns the
normalized value, raising ValidationException (field = wire name) on failure.
Nothing here touches persistence, so a rejected request changes no state.
"""

from datetime import datetime
from typing import Any

from taskboard.domain.enums import TaskPriority, TaskStatus
from taskboard.domain.exceptions import ValidationException
from taskboard.shared.utils.datetime import parse_iso_datetime, to_utc

TITLE_MAX_LENGTH = 100


def validate_title(value: Any) -> str:
    """Title is required, non-blank, and at most 100 characters."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationException("Title is required", field="title")
    if len(value) > TITLE_MAX_LENGTH:
        raise ValidationException(
            f"Title must be {TITLE_MAX_LENGTH} characters or less", field="title"
        )
    return value


def validate_description(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationException("Description is required", field="description")
    return value


def validate_due_date(value: Any) -> datetime:
    """Accept a datetime or an ISO 8601 date-time string; return UTC-aware datetime."""
    if isinstance(value, datetime):
        return to_utc(value)
    if not isinstance(value, str):
        raise ValidationException("Invalid ISO 8601 date string", field="dueDate")
    try:
        return parse_iso_datetime(value)
    except ValueError as e:
        raise ValidationException(
            "Invalid ISO 8601 date string", field="dueDate"
        ) from e


def validate_priority(value: Any) -> TaskPriority:
    try:
        return TaskPriority(value)
    except ValueError as e:
        raise ValidationException(
            f"Invalid priority. Expected one of: {', '.join(TaskPriority.values())}",
            field="priority",
        ) from e


def validate_status(value: Any) -> TaskStatus:
    try:
        return TaskStatus(value)
    except ValueError as e:
        raise ValidationException(
            f"Invalid status. Expected one of: {', '.join(TaskStatus.values())}",
            field="status",
        ) from e


def validate_assignee_id(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationException("Invalid assignee ID", field="assignedToId")
    return value.strip()
