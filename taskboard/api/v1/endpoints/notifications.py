"""Notification API: the caller's notification log and read state."""

from fastapi import APIRouter, Response

from taskboard.api.v1.dependencies import CurrentActor, NotificationServiceDep
from taskboard.schemas.common import ErrorResponse
from taskboard.schemas.notification import MarkAllReadResponse, NotificationResponse

router = APIRouter()

UNREAD_COUNT_HEADER = "X-Unread-Count"


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    response: Response,
    actor: CurrentActor,
    notification_svc: NotificationServiceDep,
):
    """List the caller's notifications, newest first. X-Unread-Count carries the unread total."""
    notifications = await notification_svc.list_by_user(actor)
    unread = await notification_svc.count_unread(actor)
    response.headers[UNREAD_COUNT_HEADER] = str(unread)
    return [NotificationResponse.model_validate(n) for n in notifications]


@router.patch("/read-all", response_model=MarkAllReadResponse)
async def mark_all_notifications_read(
    actor: CurrentActor,
    notification_svc: NotificationServiceDep,
):
    """Mark every unread notification of the caller read (idempotent)."""
    updated = await notification_svc.mark_all_as_read(actor)
    return MarkAllReadResponse(updated=updated)


@router.patch(
    "/{notification_id}/read",
    response_model=NotificationResponse,
    responses={
        403: {"model": ErrorResponse, "description": "Not the owner"},
        404: {"model": ErrorResponse, "description": "Notification not found"},
    },
)
async def mark_notification_read(
    notification_id: str,
    actor: CurrentActor,
    notification_svc: NotificationServiceDep,
):
    """Mark one of the caller's notifications read (idempotent)."""
    notification = await notification_svc.mark_as_read(actor, notification_id)
    return NotificationResponse.model_validate(notification)
