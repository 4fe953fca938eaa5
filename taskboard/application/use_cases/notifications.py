"""Notification use cases: durable per-user log and its read-state machine.

unread -> read is the only transition. There is no un-read path and no
deletion; a notification's owner (user_id) is the only actor that may read it.
"""

from __future__ import annotations

import logging

from taskboard.application.dtos.notification import NotificationResult
from taskboard.application.interfaces.repositories import INotificationRepository
from taskboard.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from taskboard.shared.context import ActorContext

logger = logging.getLogger(__name__)


class NotificationService:
    """Create, list and mark notifications read."""

    def __init__(self, notification_repo: INotificationRepository) -> None:
        self._notification_repo = notification_repo

    async def create(self, user_id: str, message: str) -> NotificationResult:
        """Append an unread notification for user_id (committed on return)."""
        if not user_id:
            raise ValidationException("Notification recipient is required", field="userId")
        if not message or not message.strip():
            raise ValidationException("Notification message is required", field="message")
        created = await self._notification_repo.create(user_id, message)
        logger.debug("Notification %s recorded for user %s", created.id, user_id)
        return created

    async def list_by_user(self, actor: ActorContext) -> list[NotificationResult]:
        """Return the actor's notifications, newest first."""
        return await self._notification_repo.list_by_user(actor.user_id)

    async def count_unread(self, actor: ActorContext) -> int:
        return await self._notification_repo.count_unread(actor.user_id)

    async def mark_as_read(
        self, actor: ActorContext, notification_id: str
    ) -> NotificationResult:
        """Mark one notification read.

        Raises ResourceNotFoundException for an unknown id and
        AuthorizationException when the actor does not own it. Marking an
        already-read notification returns it unchanged.
        """
        notification = await self._notification_repo.get_by_id(notification_id)
        if notification is None:
            raise ResourceNotFoundException("notification", notification_id)
        if notification.user_id != actor.user_id:
            raise AuthorizationException(resource="notification", action="read")
        if notification.is_read:
            return notification
        return await self._notification_repo.mark_as_read(notification_id)

    async def mark_all_as_read(self, actor: ActorContext) -> int:
        """Mark every unread notification of the actor read; return how many changed."""
        updated = await self._notification_repo.mark_all_as_read(actor.user_id)
        logger.debug("Marked %d notifications read for user %s", updated, actor.user_id)
        return updated
