"""Application services: authorization and input validation."""

from taskboard.application.services.authorization_service import (
    TaskAuthorizationGuard,
    TaskOperation,
)

__all__ = [
    "TaskAuthorizationGuard",
    "TaskOperation",
]
