"""SQLAlchemy repositories (implement the application repository protocols)."""

from taskboard.infrastructure.persistence.repositories.base import BaseRepository
from taskboard.infrastructure.persistence.repositories.notification_repo import (
    NotificationRepository,
)
from taskboard.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = [
    "BaseRepository",
    "NotificationRepository",
    "TaskRepository",
]
