"""Application service: Task use cases.

Owns the status-enum check and the required-field checks for tasks.
Status changes are an ordinary partial update with a single field, so
they go through the same read-merge-write path as ``update``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tasktracker.config.logging import get_logger
from tasktracker.domain.exceptions import ValidationError
from tasktracker.domain.model.task import Task, TaskStatus
from tasktracker.domain.repository.task_repository import TaskRepository
from tasktracker.domain.repository.user_repository import UserRepository
from tasktracker.domain.validation import (
    require_id,
    validate_description,
    validate_title,
)

logger = get_logger(__name__)


class TaskService:

    def __init__(
        self,
        task_repo: TaskRepository,
        user_repo: UserRepository,
    ) -> None:
        self._task_repo = task_repo
        self._user_repo = user_repo

    def get_all(self, user_id: int | None = None) -> list[Task]:
        logger.debug("tasks_listed", user_id=user_id)
        return self._task_repo.find_all(user_id)

    def get_by_id(self, task_id: int) -> Task:
        logger.debug("task_requested", task_id=task_id)
        return self._task_repo.find_by_id(task_id)

    def create(self, data: Mapping[str, Any]) -> Task:
        """Create a task; ``status`` defaults to pending when omitted or empty."""
        title = validate_title(data.get("title"))
        user_id = require_id(data.get("user_id"), "User ID")
        status = TaskStatus.PENDING
        if data.get("status"):
            status = TaskStatus.parse(data["status"])
        description = validate_description(data.get("description"))

        self._ensure_user_exists(user_id)

        task = self._task_repo.create(
            {
                "title": title,
                "description": description,
                "status": status,
                "user_id": user_id,
            }
        )
        logger.info("task_created", task_id=task.id, user_id=user_id)
        return task

    def update(self, task_id: int, data: Mapping[str, Any]) -> Task:
        """Apply a partial update; absent fields are left untouched."""
        changes: dict[str, Any] = {}
        if "title" in data:
            changes["title"] = validate_title(data["title"])
        if "description" in data:
            changes["description"] = validate_description(data["description"])
        if "status" in data:
            changes["status"] = TaskStatus.parse(data["status"])
        if "user_id" in data:
            changes["user_id"] = require_id(data["user_id"], "User ID")
            self._ensure_user_exists(changes["user_id"])

        task = self._task_repo.update(task_id, changes)
        logger.info("task_updated", task_id=task_id, fields=sorted(changes))
        return task

    def update_status(self, task_id: int, status: object) -> Task:
        """Set only the status.  Any status may follow any other."""
        new_status = TaskStatus.parse(status)
        task = self._task_repo.update(task_id, {"status": new_status})
        logger.info("task_status_updated", task_id=task_id, status=new_status.value)
        return task

    def delete(self, task_id: int) -> None:
        self._task_repo.delete(task_id)
        logger.info("task_deleted", task_id=task_id)

    # --- Internal helpers -----------------------------------------------------

    def _ensure_user_exists(self, user_id: int) -> None:
        # The store's foreign key is still the final guard against a
        # user deleted between this check and the write.
        if not self._user_repo.exists(user_id):
            raise ValidationError(
                f"User with ID {user_id} does not exist",
                details={"userId": user_id},
            )
