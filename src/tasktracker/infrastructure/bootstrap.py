"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions, and the store handle
is always passed in, never looked up globally.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from tasktracker.application.task_service import TaskService
from tasktracker.application.user_service import UserService
from tasktracker.config.logging import configure_logging
from tasktracker.config.settings import Settings
from tasktracker.infrastructure.persistence.database import Database
from tasktracker.infrastructure.persistence.sql_task_repository import (
    SqlTaskRepository,
)
from tasktracker.infrastructure.persistence.sql_user_repository import (
    SqlUserRepository,
)


def load_settings() -> Settings:
    settings = Settings()
    configure_logging(settings.log_level, json=settings.log_json)
    return settings


def database(settings: Settings) -> Database:
    return Database(settings.database_url, echo=settings.echo_sql)


def user_service(session: Session) -> UserService:
    return UserService(user_repo=SqlUserRepository(session))


def task_service(session: Session) -> TaskService:
    return TaskService(
        task_repo=SqlTaskRepository(session),
        user_repo=SqlUserRepository(session),
    )
