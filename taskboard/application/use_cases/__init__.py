"""Application use cases: one entry point per workflow."""

from taskboard.application.use_cases.notifications import NotificationService
from taskboard.application.use_cases.tasks import TaskService

__all__ = [
    "NotificationService",
    "TaskService",
]
