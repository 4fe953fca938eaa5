"""Notification API schemas."""

from datetime import datetime

from pydantic import Field

from taskboard.schemas.common import CamelModel


class NotificationResponse(CamelModel):
    """Notification in the caller's log."""

    id: str
    user_id: str
    message: str
    is_read: bool
    created_at: datetime


class MarkAllReadResponse(CamelModel):
    """Response for PATCH /notifications/read-all."""

    updated: int = Field(..., description="Notifications flipped from unread to read")
