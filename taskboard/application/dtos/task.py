"""DTOs for tasks (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from taskboard.domain.enums import TaskPriority, TaskStatus
from taskboard.shared.utils.datetime import isoformat_utc


@dataclass(frozen=True)
class UserSummary:
    """Denormalized display fields of a user referenced by a task."""

    id: str
    name: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass(frozen=True)
class TaskResult:
    """Committed task state, as returned by the repository."""

    id: str
    title: str
    description: str
    due_date: datetime
    priority: TaskPriority
    status: TaskStatus
    creator_id: str
    assigned_to_id: str
    created_at: datetime
    updated_at: datetime
    creator: UserSummary | None = None
    assigned_to: UserSummary | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for real-time event payloads (camelCase, ISO datetimes)."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": isoformat_utc(self.due_date),
            "priority": self.priority.value,
            "status": self.status.value,
            "creatorId": self.creator_id,
            "assignedToId": self.assigned_to_id,
            "createdAt": isoformat_utc(self.created_at),
            "updatedAt": isoformat_utc(self.updated_at),
            "creator": self.creator.to_dict() if self.creator else None,
            "assignedTo": self.assigned_to.to_dict() if self.assigned_to else None,
        }


@dataclass(frozen=True)
class TaskCreate:
    """Raw create input. TaskService validates and normalizes every field."""

    title: Any
    description: Any
    due_date: Any
    priority: Any
    assigned_to_id: str | None = None


@dataclass(frozen=True)
class TaskUpdate:
    """Raw partial update. None means 'leave unchanged'."""

    title: Any = None
    description: Any = None
    due_date: Any = None
    priority: Any = None
    status: Any = None
    assigned_to_id: str | None = None


@dataclass(frozen=True)
class TaskQuery:
    """List criteria as received (query-string values, unvalidated).

    filter selects the base scope (assigned / created / overdue / default);
    status and priority are optional equality predicates; unknown values for
    them are dropped rather than rejected.
    """

    filter: str | None = None
    status: str | None = None
    priority: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None
