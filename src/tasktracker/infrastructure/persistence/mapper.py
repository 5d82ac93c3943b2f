"""Row-to-entity mapping for the SQL repositories."""

from __future__ import annotations

from datetime import datetime, timezone

from tasktracker.domain.model.task import Task
from tasktracker.domain.model.user import User
from tasktracker.infrastructure.persistence.schema import TaskRow, UserRow


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def user_summary(row: UserRow) -> User:
    """A user without its tasks, used as a task's resolved owner."""
    return User(
        id=row.id,
        email=row.email,
        name=row.name,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


def task_summary(row: TaskRow) -> Task:
    """A task without its owner, used inside a user's task list."""
    return Task(
        id=row.id,
        title=row.title,
        description=row.description,
        status=row.status,
        user_id=row.user_id,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


def to_user(row: UserRow) -> User:
    user = user_summary(row)
    user.tasks = [task_summary(t) for t in row.tasks]
    return user


def to_task(row: TaskRow) -> Task:
    task = task_summary(row)
    task.user = user_summary(row.user)
    return task
