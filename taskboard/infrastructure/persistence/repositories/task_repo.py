"""Task repository: persistence and list-filter translation."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from sqlalchemy import ColumnElement, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from taskboard.application.dtos.task import TaskQuery, TaskResult, UserSummary
from taskboard.domain.enums import (
    SortOrder,
    TaskListFilter,
    TaskPriority,
    TaskStatus,
)
from taskboard.domain.exceptions import ResourceNotFoundException
from taskboard.infrastructure.persistence.models.task import Task
from taskboard.infrastructure.persistence.models.user import User
from taskboard.infrastructure.persistence.repositories.base import BaseRepository
from taskboard.shared.utils.datetime import ensure_utc, utc_now

# Columns a caller may change after creation (creator_id and id are immutable).
UPDATABLE_FIELDS = frozenset(
    {"title", "description", "due_date", "priority", "status", "assigned_to_id"}
)

SORT_BY_DUE_DATE = "dueDate"


def _to_summary(user: User | None) -> UserSummary | None:
    if user is None:
        return None
    return UserSummary(id=user.id, name=user.name, email=user.email)


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        title=t.title,
        description=t.description,
        due_date=ensure_utc(t.due_date),
        priority=TaskPriority(t.priority),
        status=TaskStatus(t.status),
        creator_id=t.creator_id,
        assigned_to_id=t.assigned_to_id,
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
        creator=_to_summary(t.creator),
        assigned_to=_to_summary(t.assigned_to),
    )


def build_task_filter(
    actor_id: str, criteria: TaskQuery, now: datetime
) -> list[ColumnElement[bool]]:
    """Translate the filter vocabulary into WHERE conditions (ANDed).

    - assigned: assigned to the actor
    - created: created by the actor
    - overdue: assigned to the actor, due before now, not COMPLETED
    - anything else: created by or assigned to the actor

    status and priority add equality predicates. Values outside the enums
    are ignored on purpose: a bad query-string value widens the result
    instead of failing the request.
    """
    base = criteria.filter
    conditions: list[ColumnElement[bool]]
    if base == TaskListFilter.ASSIGNED.value:
        conditions = [Task.assigned_to_id == actor_id]
    elif base == TaskListFilter.CREATED.value:
        conditions = [Task.creator_id == actor_id]
    elif base == TaskListFilter.OVERDUE.value:
        conditions = [
            Task.due_date < now,
            Task.status != TaskStatus.COMPLETED.value,
            Task.assigned_to_id == actor_id,
        ]
    else:
        conditions = [or_(Task.creator_id == actor_id, Task.assigned_to_id == actor_id)]

    if criteria.status in TaskStatus.values():
        conditions.append(Task.status == criteria.status)
    if criteria.priority in TaskPriority.values():
        conditions.append(Task.priority == criteria.priority)
    return conditions


def is_descending(criteria: TaskQuery) -> bool:
    """Only sortBy=dueDate&sortOrder=desc reverses the default due-date ascending order."""
    return (
        criteria.sort_by == SORT_BY_DUE_DATE
        and criteria.sort_order == SortOrder.DESC.value
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    integrity_field = "assignedToId"

    def __init__(
        self,
        db: AsyncSession,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        super().__init__(db, Task)
        self._clock = clock

    def _select(self):
        return select(Task).options(
            selectinload(Task.creator), selectinload(Task.assigned_to)
        )

    async def _load(self, task_id: str) -> Task | None:
        """Load a task with its user summaries, overwriting any stale identity-map state."""
        result = await self.db.execute(
            self._select()
            .where(Task.id == task_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        *,
        title: str,
        description: str,
        due_date: datetime,
        priority: TaskPriority,
        creator_id: str,
        assigned_to_id: str,
        status: TaskStatus = TaskStatus.TODO,
    ) -> TaskResult:
        """Create a task and return the committed result."""
        task = Task(
            title=title,
            description=description,
            due_date=ensure_utc(due_date),
            priority=priority.value,
            status=status.value,
            creator_id=creator_id,
            assigned_to_id=assigned_to_id,
        )
        await self._add(task)
        loaded = await self._load(task.id)
        if loaded is None:
            raise ResourceNotFoundException("task", task.id)
        return _to_result(loaded)

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        task = await self._load(task_id)
        return _to_result(task) if task else None

    async def find_many(self, actor_id: str, criteria: TaskQuery) -> list[TaskResult]:
        """Return the actor's tasks for the given criteria, sorted by due date."""
        conditions = build_task_filter(actor_id, criteria, self._clock())
        if is_descending(criteria):
            order = (Task.due_date.desc(), Task.created_at.desc())
        else:
            order = (Task.due_date.asc(), Task.created_at.asc())
        result = await self.db.execute(self._select().where(*conditions).order_by(*order))
        return [_to_result(t) for t in result.scalars().all()]

    async def update(self, task_id: str, changes: dict[str, Any]) -> TaskResult:
        """Apply changes (last write wins) and return the committed result."""
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update task fields: {', '.join(sorted(unknown))}")
        task = await self.get_orm(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        for key, value in changes.items():
            if isinstance(value, (TaskPriority, TaskStatus)):
                value = value.value
            elif isinstance(value, datetime):
                value = ensure_utc(value)
            setattr(task, key, value)
        await self._commit()
        loaded = await self._load(task_id)
        if loaded is None:
            raise ResourceNotFoundException("task", task_id)
        return _to_result(loaded)

    async def delete(self, task_id: str) -> None:
        task = await self.get_orm(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        await self._remove(task)
