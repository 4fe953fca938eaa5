"""Application DTOs (no ORM dependency)."""

from taskboard.application.dtos.notification import NotificationResult
from taskboard.application.dtos.task import (
    TaskCreate,
    TaskQuery,
    TaskResult,
    TaskUpdate,
    UserSummary,
)

__all__ = [
    "NotificationResult",
    "TaskCreate",
    "TaskQuery",
    "TaskResult",
    "TaskUpdate",
    "UserSummary",
]
