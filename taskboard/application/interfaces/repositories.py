"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure repositories implement (DIP).
Every write is its own transaction: when a write method returns, the change
is committed.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from taskboard.domain.enums import TaskPriority, TaskStatus

if TYPE_CHECKING:
    from taskboard.application.dtos.notification import NotificationResult
    from taskboard.application.dtos.task import TaskQuery, TaskResult


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for task persistence and list-filter translation."""

    async def create(
        self,
        *,
        title: str,
        description: str,
        due_date: datetime,
        priority: TaskPriority,
        creator_id: str,
        assigned_to_id: str,
        status: TaskStatus = TaskStatus.TODO,
    ) -> TaskResult:
        """Persist a new task and return it."""

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        """Return the task or None."""

    async def find_many(self, actor_id: str, criteria: TaskQuery) -> list[TaskResult]:
        """Return tasks matching the filter vocabulary, sorted by due date."""

    async def update(self, task_id: str, changes: dict[str, Any]) -> TaskResult:
        """Apply changes; raise ResourceNotFoundException if the task is missing."""

    async def delete(self, task_id: str) -> None:
        """Delete; raise ResourceNotFoundException if the task is missing."""


# Notification repository interface
class INotificationRepository(Protocol):
    """Protocol for the durable per-user notification log."""

    async def create(self, user_id: str, message: str) -> NotificationResult:
        """Append an unread notification for user_id."""

    async def get_by_id(self, notification_id: str) -> NotificationResult | None:
        """Return the notification or None."""

    async def list_by_user(self, user_id: str) -> list[NotificationResult]:
        """Return the user's notifications, newest first."""

    async def mark_as_read(self, notification_id: str) -> NotificationResult:
        """Set is_read; raise ResourceNotFoundException if missing."""

    async def mark_all_as_read(self, user_id: str) -> int:
        """Mark every unread notification of user_id read; return how many changed."""

    async def count_unread(self, user_id: str) -> int:
        """Return the number of unread notifications for user_id."""
