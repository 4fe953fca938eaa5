"""Domain enumerations for taskboard.

Enums represent fixed sets of domain values (task status, priority) and the
fixed vocabulary of list filters.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task workflow status. New tasks start in TODO."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    REVIEW = "REVIEW"
    COMPLETED = "COMPLETED"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings."""
        return [status.value for status in cls]


class TaskPriority(str, Enum):
    """Task priority."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid priority values as strings."""
        return [priority.value for priority in cls]


class TaskListFilter(str, Enum):
    """Named list filters. Anything else means 'created by or assigned to me'."""

    ASSIGNED = "assigned"
    CREATED = "created"
    OVERDUE = "overdue"


class SortOrder(str, Enum):
    """Sort direction for task lists (only due date is sortable)."""

    ASC = "asc"
    DESC = "desc"


class RealtimeEvent(str, Enum):
    """Names of events pushed to connected clients (wire contract)."""

    TASK_CREATED = "task:created"
    TASK_UPDATED = "task:updated"
    TASK_DELETED = "task:deleted"
    NOTIFICATION_ASSIGNED = "notification:assigned"
