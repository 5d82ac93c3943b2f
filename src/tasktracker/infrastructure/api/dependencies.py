"""Request-scoped dependencies.

Each request gets its own session from the application's store handle;
the session commits when the request succeeds and rolls back otherwise.
"""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from tasktracker.application.task_service import TaskService
from tasktracker.application.user_service import UserService
from tasktracker.infrastructure import bootstrap
from tasktracker.infrastructure.persistence.database import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_session(database: Database = Depends(get_database)) -> Iterator[Session]:
    with database.session() as session:
        yield session


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return bootstrap.user_service(session)


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    return bootstrap.task_service(session)
