"""Task authorization: per-operation permission checks.

Policy: delete is creator-only; create, read and update need only an
authenticated actor (any actor may edit any task). The asymmetry is the
intended policy; do not tighten update without a product decision.
"""

from __future__ import annotations

from enum import Enum

from taskboard.application.dtos.task import TaskResult
from taskboard.domain.exceptions import AuthorizationException
from taskboard.shared.context import ActorContext


class TaskOperation(str, Enum):
    """Operations checked by TaskAuthorizationGuard."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class TaskAuthorizationGuard:
    """Stateless allow/deny decision for (actor, operation, task)."""

    def is_allowed(
        self,
        actor: ActorContext,
        operation: TaskOperation,
        task: TaskResult | None = None,
    ) -> bool:
        """Return True if actor may perform operation on task."""
        if operation is TaskOperation.DELETE:
            return task is not None and actor.user_id == task.creator_id
        return True

    def check(
        self,
        actor: ActorContext,
        operation: TaskOperation,
        task: TaskResult | None = None,
    ) -> None:
        """Raise AuthorizationException if actor may not perform operation."""
        if not self.is_allowed(actor, operation, task):
            raise AuthorizationException(resource="task", action=operation.value)
