"""Task use cases: validation -> authorization -> persistence -> fan-out.

Every mutation is committed by the repository before anything is published.
Publishing is best effort: a failure on the real-time path is logged and
never fails or rolls back the mutation, so clients treat the REST response
as authoritative and push events as a hint. Assignment changes are also
recorded in the notification log, which is the durable fallback for a
missed push.
"""

from __future__ import annotations

import logging
from typing import Any

from taskboard.application.dtos.task import TaskCreate, TaskQuery, TaskResult, TaskUpdate
from taskboard.application.interfaces.repositories import ITaskRepository
from taskboard.application.interfaces.services import IEventPublisher
from taskboard.application.services.authorization_service import (
    TaskAuthorizationGuard,
    TaskOperation,
)
from taskboard.application.services.task_validator import (
    validate_assignee_id,
    validate_description,
    validate_due_date,
    validate_priority,
    validate_status,
    validate_title,
)
from taskboard.application.use_cases.notifications import NotificationService
from taskboard.domain.enums import RealtimeEvent
from taskboard.domain.exceptions import ResourceNotFoundException, TransportException
from taskboard.shared.context import ActorContext

logger = logging.getLogger(__name__)

ASSIGNED_ON_CREATE_MESSAGE = "You have been assigned a new task: {title}"
ASSIGNED_ON_UPDATE_MESSAGE = "You have been assigned a task: {title}"


class TaskService:
    """Create, list, fetch, update and delete tasks for an authenticated actor."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        notification_service: NotificationService,
        event_publisher: IEventPublisher,
        guard: TaskAuthorizationGuard | None = None,
    ) -> None:
        self._task_repo = task_repo
        self._notification_service = notification_service
        self._event_publisher = event_publisher
        self._guard = guard or TaskAuthorizationGuard()

    async def create_task(self, actor: ActorContext, data: TaskCreate) -> TaskResult:
        """Create a task owned by actor; assignee defaults to actor.

        Publishes task:created. When the assignee is someone else, records a
        notification for them and publishes notification:assigned.
        """
        title = validate_title(data.title)
        description = validate_description(data.description)
        due_date = validate_due_date(data.due_date)
        priority = validate_priority(data.priority)
        assigned_to_id = (
            validate_assignee_id(data.assigned_to_id)
            if data.assigned_to_id is not None
            else actor.user_id
        )
        self._guard.check(actor, TaskOperation.CREATE)

        task = await self._task_repo.create(
            title=title,
            description=description,
            due_date=due_date,
            priority=priority,
            creator_id=actor.user_id,
            assigned_to_id=assigned_to_id,
        )
        logger.info("Task %s created by %s", task.id, actor.user_id)

        await self._emit(RealtimeEvent.TASK_CREATED, task.to_dict())
        if task.assigned_to_id != actor.user_id:
            await self._notify_assignee(
                task, ASSIGNED_ON_CREATE_MESSAGE.format(title=task.title)
            )
        return task

    async def get_tasks(self, actor: ActorContext, criteria: TaskQuery) -> list[TaskResult]:
        """List tasks visible through the filter vocabulary (see TaskRepository.find_many)."""
        self._guard.check(actor, TaskOperation.READ)
        return await self._task_repo.find_many(actor.user_id, criteria)

    async def get_task_by_id(self, actor: ActorContext, task_id: str) -> TaskResult:
        """Return the task; any authenticated actor may fetch any task by id."""
        task = await self._task_repo.get_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        self._guard.check(actor, TaskOperation.READ, task)
        return task

    async def update_task(
        self, actor: ActorContext, task_id: str, data: TaskUpdate
    ) -> TaskResult:
        """Apply a partial update; fields left as None are unchanged.

        Publishes task:updated. When assigned_to_id is in the patch and is not
        the actor, records a notification for the assignee and publishes
        notification:assigned (even if the assignee did not change).
        """
        existing = await self._task_repo.get_by_id(task_id)
        if existing is None:
            raise ResourceNotFoundException("task", task_id)
        changes = self._validate_changes(data)
        self._guard.check(actor, TaskOperation.UPDATE, existing)

        task = await self._task_repo.update(task_id, changes)
        logger.info(
            "Task %s updated by %s (fields: %s)",
            task_id,
            actor.user_id,
            ", ".join(sorted(changes)) or "none",
        )

        await self._emit(RealtimeEvent.TASK_UPDATED, task.to_dict())
        assignee = changes.get("assigned_to_id")
        if assignee is not None and assignee != actor.user_id:
            await self._notify_assignee(
                task, ASSIGNED_ON_UPDATE_MESSAGE.format(title=task.title)
            )
        return task

    async def delete_task(self, actor: ActorContext, task_id: str) -> None:
        """Delete a task. Only its creator may delete it."""
        existing = await self._task_repo.get_by_id(task_id)
        if existing is None:
            raise ResourceNotFoundException("task", task_id)
        self._guard.check(actor, TaskOperation.DELETE, existing)

        await self._task_repo.delete(task_id)
        logger.info("Task %s deleted by %s", task_id, actor.user_id)
        await self._emit(RealtimeEvent.TASK_DELETED, {"id": task_id})

    @staticmethod
    def _validate_changes(data: TaskUpdate) -> dict[str, Any]:
        """Validate present fields and return column -> value changes."""
        changes: dict[str, Any] = {}
        if data.title is not None:
            changes["title"] = validate_title(data.title)
        if data.description is not None:
            changes["description"] = validate_description(data.description)
        if data.due_date is not None:
            changes["due_date"] = validate_due_date(data.due_date)
        if data.priority is not None:
            changes["priority"] = validate_priority(data.priority)
        if data.status is not None:
            changes["status"] = validate_status(data.status)
        if data.assigned_to_id is not None:
            changes["assigned_to_id"] = validate_assignee_id(data.assigned_to_id)
        return changes

    async def _notify_assignee(self, task: TaskResult, message: str) -> None:
        """Record the durable notification, then push the assignment hint.

        The task is already committed; a failed notification write is logged
        and skipped so the mutation still reports success.
        """
        try:
            notification = await self._notification_service.create(
                task.assigned_to_id, message
            )
        except Exception:
            logger.exception(
                "Failed to record assignment notification for task %s (user %s)",
                task.id,
                task.assigned_to_id,
            )
            return
        await self._emit(
            RealtimeEvent.NOTIFICATION_ASSIGNED,
            {
                "userId": notification.user_id,
                "taskId": task.id,
                "message": notification.message,
            },
        )

    async def _emit(self, event: RealtimeEvent, payload: dict[str, Any]) -> None:
        """Publish after commit; swallow and log any failure."""
        try:
            await self._event_publisher.publish(event.value, payload)
        except TransportException as e:
            logger.warning("Skipped %s event: %s", event.value, e.message)
        except Exception:
            logger.exception("Failed to publish %s event", event.value)
