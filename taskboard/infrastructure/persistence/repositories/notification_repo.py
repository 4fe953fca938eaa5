"""Notification repository: append-only per-user log with read flags."""

from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.application.dtos.notification import NotificationResult
from taskboard.domain.exceptions import ResourceNotFoundException
from taskboard.infrastructure.persistence.models.notification import Notification
from taskboard.infrastructure.persistence.repositories.base import BaseRepository
from taskboard.shared.utils.datetime import ensure_utc


def _to_result(n: Notification) -> NotificationResult:
    """Map Notification ORM to NotificationResult DTO."""
    return NotificationResult(
        id=n.id,
        user_id=n.user_id,
        message=n.message,
        is_read=n.is_read,
        created_at=ensure_utc(n.created_at),
    )


class NotificationRepository(BaseRepository[Notification]):
    """Notification repository. Implements INotificationRepository."""

    integrity_field = "userId"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Notification)

    async def create(self, user_id: str, message: str) -> NotificationResult:
        notification = Notification(user_id=user_id, message=message, is_read=False)
        await self._add(notification)
        return _to_result(notification)

    async def get_by_id(self, notification_id: str) -> NotificationResult | None:
        notification = await self.get_orm(notification_id)
        return _to_result(notification) if notification else None

    async def list_by_user(self, user_id: str) -> list[NotificationResult]:
        """Return all notifications for user_id, newest first."""
        result = await self.db.execute(
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
        )
        return [_to_result(n) for n in result.scalars().all()]

    async def mark_as_read(self, notification_id: str) -> NotificationResult:
        notification = await self.get_orm(notification_id)
        if notification is None:
            raise ResourceNotFoundException("notification", notification_id)
        notification.is_read = True
        await self._commit()
        return _to_result(notification)

    async def mark_all_as_read(self, user_id: str) -> int:
        """Flip every unread notification of user_id; return the number flipped."""
        result = await self.db.execute(
            update(Notification)
            .where(Notification.user_id == user_id, Notification.is_read.is_(False))
            .values(is_read=True)
            .execution_options(synchronize_session=False)
        )
        await self._commit()
        # Bulk UPDATE bypasses the identity map; drop any stale is_read state.
        self.db.expire_all()
        return result.rowcount or 0

    async def count_unread(self, user_id: str) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(Notification)
            .where(Notification.user_id == user_id, Notification.is_read.is_(False))
        )
        return int(result.scalar_one())
