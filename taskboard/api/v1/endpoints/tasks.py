"""Task API: thin routes delegating to TaskService."""

from typing import Annotated

from fastapi import APIRouter, Query

from taskboard.api.v1.dependencies import CurrentActor, TaskServiceDep
from taskboard.application.dtos.task import TaskQuery
from taskboard.schemas.common import ErrorResponse
from taskboard.schemas.task import (
    TaskCreateRequest,
    TaskDeletedResponse,
    TaskResponse,
    TaskUpdateRequest,
)

router = APIRouter()

_ERRORS = {
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    422: {"model": ErrorResponse, "description": "Validation failed"},
}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Task not found"}}


@router.post("", response_model=TaskResponse, status_code=201, responses=_ERRORS)
async def create_task(
    body: TaskCreateRequest,
    actor: CurrentActor,
    task_svc: TaskServiceDep,
):
    """Create a task. assignedToId defaults to the caller."""
    created = await task_svc.create_task(actor, body.to_command())
    return TaskResponse.model_validate(created)


@router.get("", response_model=list[TaskResponse], responses=_ERRORS)
async def list_tasks(
    actor: CurrentActor,
    task_svc: TaskServiceDep,
    filter_: Annotated[
        str | None,
        Query(alias="filter", description="assigned | created | overdue"),
    ] = None,
    status: Annotated[str | None, Query()] = None,
    priority: Annotated[str | None, Query()] = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    sort_order: Annotated[str | None, Query(alias="sortOrder")] = None,
):
    """List the caller's tasks. Unknown status/priority values are ignored."""
    tasks = await task_svc.get_tasks(
        actor,
        TaskQuery(
            filter=filter_,
            status=status,
            priority=priority,
            sort_by=sort_by,
            sort_order=sort_order,
        ),
    )
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get(
    "/{task_id}", response_model=TaskResponse, responses={**_ERRORS, **_NOT_FOUND}
)
async def get_task(task_id: str, actor: CurrentActor, task_svc: TaskServiceDep):
    """Get a task by id (any authenticated user)."""
    task = await task_svc.get_task_by_id(actor, task_id)
    return TaskResponse.model_validate(task)


@router.put(
    "/{task_id}", response_model=TaskResponse, responses={**_ERRORS, **_NOT_FOUND}
)
async def update_task(
    task_id: str,
    body: TaskUpdateRequest,
    actor: CurrentActor,
    task_svc: TaskServiceDep,
):
    """Partially update a task (any authenticated user)."""
    updated = await task_svc.update_task(actor, task_id, body.to_command())
    return TaskResponse.model_validate(updated)


@router.delete(
    "/{task_id}",
    response_model=TaskDeletedResponse,
    responses={
        **_ERRORS,
        **_NOT_FOUND,
        403: {"model": ErrorResponse, "description": "Caller is not the creator"},
    },
)
async def delete_task(task_id: str, actor: CurrentActor, task_svc: TaskServiceDep):
    """Delete a task (creator only)."""
    await task_svc.delete_task(actor, task_id)
    return TaskDeletedResponse(id=task_id)
