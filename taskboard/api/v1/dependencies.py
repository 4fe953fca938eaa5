"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the DB session, the authenticated actor,
the process EventBus, and the application services. Routes depend only on
these; they never construct repositories or reach for globals.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.application.services.authorization_service import TaskAuthorizationGuard
from taskboard.application.use_cases.notifications import NotificationService
from taskboard.application.use_cases.tasks import TaskService
from taskboard.domain.exceptions import AuthenticationException
from taskboard.infrastructure.messaging.event_bus import EventBus
from taskboard.infrastructure.persistence.database import get_db
from taskboard.infrastructure.persistence.repositories import (
    NotificationRepository,
    TaskRepository,
)
from taskboard.infrastructure.security.jwt import verify_token
from taskboard.shared.context import ActorContext

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_actor(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> ActorContext:
    """Return the authenticated actor from the bearer token; 401 if missing or invalid."""
    if not credentials or not credentials.credentials:
        raise AuthenticationException("No token provided")
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        raise AuthenticationException("Invalid token") from e
    email = payload.get("email")
    return ActorContext(
        user_id=str(payload["sub"]),
        email=email if isinstance(email, str) else None,
    )


def get_event_bus(request: Request) -> EventBus:
    """The EventBus built once by create_app()."""
    return request.app.state.event_bus


def get_task_guard() -> TaskAuthorizationGuard:
    return TaskAuthorizationGuard()


async def get_notification_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> NotificationService:
    """Build NotificationService over the request session."""
    return NotificationService(NotificationRepository(db))


async def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    notification_service: Annotated[
        NotificationService, Depends(get_notification_service)
    ],
    event_bus: Annotated[EventBus, Depends(get_event_bus)],
    guard: Annotated[TaskAuthorizationGuard, Depends(get_task_guard)],
) -> TaskService:
    """Build TaskService: task repo, notification service and EventBus share the request."""
    return TaskService(
        task_repo=TaskRepository(db),
        notification_service=notification_service,
        event_publisher=event_bus,
        guard=guard,
    )


CurrentActor = Annotated[ActorContext, Depends(get_current_actor)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
NotificationServiceDep = Annotated[
    NotificationService, Depends(get_notification_service)
]
