"""DTOs for notifications (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from taskboard.shared.utils.datetime import isoformat_utc


@dataclass(frozen=True)
class NotificationResult:
    """Notification row in the per-user log."""

    id: str
    user_id: str
    message: str
    is_read: bool
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "message": self.message,
            "isRead": self.is_read,
            "createdAt": isoformat_utc(self.created_at),
        }
