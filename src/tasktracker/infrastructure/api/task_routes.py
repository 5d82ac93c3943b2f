"""HTTP endpoints for the Task entity."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from tasktracker.application.task_service import TaskService
from tasktracker.domain.exceptions import ValidationError
from tasktracker.domain.model.task import Task
from tasktracker.infrastructure.api.dependencies import get_task_service
from tasktracker.infrastructure.api.params import parse_id, parse_optional_id
from tasktracker.infrastructure.api.schemas import (
    TaskPayload,
    TaskResponse,
    TaskStatusPayload,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
def list_tasks(
    user_id: str | None = Query(None, alias="userId"),
    service: TaskService = Depends(get_task_service),
) -> list[Task]:
    """List tasks newest first, optionally only those of ``?userId=``."""
    owner = parse_optional_id(user_id, "user ID in query parameter")
    return service.get_all(owner)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, service: TaskService = Depends(get_task_service)) -> Task:
    return service.get_by_id(parse_id(task_id, "task ID"))


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: TaskPayload,
    service: TaskService = Depends(get_task_service),
) -> Task:
    return service.create(payload.present_fields())


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    payload: TaskPayload,
    service: TaskService = Depends(get_task_service),
) -> Task:
    tid = parse_id(task_id, "task ID")
    return service.update(tid, payload.present_fields())


@router.patch("/{task_id}/status", response_model=TaskResponse)
def update_task_status(
    task_id: str,
    payload: TaskStatusPayload,
    service: TaskService = Depends(get_task_service),
) -> Task:
    tid = parse_id(task_id, "task ID")
    # Presence is checked here; the enum check belongs to the service.
    if not payload.status:
        raise ValidationError("Status is required")
    return service.update_status(tid, payload.status)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, service: TaskService = Depends(get_task_service)) -> Response:
    service.delete(parse_id(task_id, "task ID"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
