"""Application ports: repository and service protocols."""

from taskboard.application.interfaces.repositories import (
    INotificationRepository,
    ITaskRepository,
)
from taskboard.application.interfaces.services import (
    IBroadcastTransport,
    IEventPublisher,
)

__all__ = [
    "IBroadcastTransport",
    "IEventPublisher",
    "INotificationRepository",
    "ITaskRepository",
]
