"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from taskboard.domain.enums import (
    RealtimeEvent,
    SortOrder,
    TaskListFilter,
    TaskPriority,
    TaskStatus,
)
from taskboard.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    EventBusNotInitializedError,
    ResourceNotFoundException,
    TaskboardException,
    TransportException,
    ValidationException,
)

__all__ = [
    # Enums
    "RealtimeEvent",
    "SortOrder",
    "TaskListFilter",
    "TaskPriority",
    "TaskStatus",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "EventBusNotInitializedError",
    "ResourceNotFoundException",
    "TaskboardException",
    "TransportException",
    "ValidationException",
]
