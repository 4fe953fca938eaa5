"""Task API schemas.

Request bodies only check JSON types; TaskService does the field rules
(title length, enum values, date-time format) so direct callers and HTTP
callers get the same validation.
"""

from datetime import datetime

from pydantic import Field

from taskboard.application.dtos.task import TaskCreate, TaskUpdate
from taskboard.domain.enums import TaskPriority, TaskStatus
from taskboard.schemas.common import CamelModel


class TaskCreateRequest(CamelModel):
    """Request body for POST /tasks."""

    title: str
    description: str
    due_date: str = Field(..., description="ISO 8601 date-time")
    priority: str = Field(..., description="LOW | MEDIUM | HIGH | URGENT")
    assigned_to_id: str | None = Field(
        default=None, description="Assignee user id; defaults to the caller"
    )

    def to_command(self) -> TaskCreate:
        return TaskCreate(
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            priority=self.priority,
            assigned_to_id=self.assigned_to_id,
        )


class TaskUpdateRequest(CamelModel):
    """Request body for PUT /tasks/{id} (partial; omitted or null fields are unchanged)."""

    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    priority: str | None = None
    status: str | None = None
    assigned_to_id: str | None = None

    def to_command(self) -> TaskUpdate:
        return TaskUpdate(
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            priority=self.priority,
            status=self.status,
            assigned_to_id=self.assigned_to_id,
        )


class UserSummaryResponse(CamelModel):
    """Display fields of the creator / assignee."""

    id: str
    name: str
    email: str


class TaskResponse(CamelModel):
    """Task as returned by the REST API (same shape as task:* event payloads)."""

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
    creator: UserSummaryResponse | None = None
    assigned_to: UserSummaryResponse | None = None


class TaskDeletedResponse(CamelModel):
    """Response for DELETE /tasks/{id}."""

    id: str
