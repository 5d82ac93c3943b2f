"""SQLAlchemy-backed implementation of TaskRepository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from tasktracker.domain.exceptions import EntityNotFoundError, ValidationError
from tasktracker.domain.model.task import Task, TaskStatus
from tasktracker.domain.repository.task_repository import TaskRepository
from tasktracker.infrastructure.persistence.mapper import to_task
from tasktracker.infrastructure.persistence.schema import TaskRow, utcnow

_UPDATABLE_FIELDS = ("title", "description", "status", "user_id")


class SqlTaskRepository(TaskRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- TaskRepository interface ---------------------------------------------

    def find_all(self, user_id: int | None = None) -> list[Task]:
        stmt = (
            select(TaskRow)
            .options(joinedload(TaskRow.user))
            .order_by(TaskRow.created_at.desc(), TaskRow.id.desc())
        )
        if user_id is not None:
            stmt = stmt.where(TaskRow.user_id == user_id)
        return [to_task(row) for row in self._session.scalars(stmt)]

    def find_by_id(self, task_id: int) -> Task:
        return to_task(self._get_row(task_id))

    def create(self, data: Mapping[str, Any]) -> Task:
        row = TaskRow(
            title=data["title"],
            description=data.get("description"),
            status=data.get("status") or TaskStatus.PENDING,
            user_id=data["user_id"],
        )
        self._session.add(row)
        self._flush(data["user_id"])
        self._session.refresh(row)
        return to_task(row)

    def update(self, task_id: int, changes: Mapping[str, Any]) -> Task:
        row = self._get_row(task_id)
        for field_name in _UPDATABLE_FIELDS:
            if field_name in changes:
                setattr(row, field_name, changes[field_name])
        row.updated_at = utcnow()
        self._flush(changes.get("user_id", row.user_id))
        self._session.refresh(row)
        return to_task(row)

    def delete(self, task_id: int) -> None:
        row = self._get_row(task_id)
        self._session.delete(row)
        self._session.flush()

    # --- Internal helpers -----------------------------------------------------

    def _get_row(self, task_id: int) -> TaskRow:
        row = self._session.get(TaskRow, task_id, options=[joinedload(TaskRow.user)])
        if row is None:
            raise EntityNotFoundError(f"Task with ID {task_id} not found")
        return row

    def _flush(self, user_id: int) -> None:
        try:
            self._session.flush()
        except IntegrityError as exc:
            self._session.rollback()
            if _is_owner_violation(exc):
                raise ValidationError(
                    f"User with ID {user_id} does not exist",
                    details={"userId": user_id},
                ) from exc
            raise


def _is_owner_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig).lower()
    return "foreign key" in message or "fk_tasks_user_id_users" in message
