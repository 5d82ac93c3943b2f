"""SQLAlchemy-backed implementation of UserRepository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from tasktracker.domain.exceptions import ConflictError, EntityNotFoundError
from tasktracker.domain.model.user import User
from tasktracker.domain.repository.user_repository import UserRepository
from tasktracker.infrastructure.persistence.mapper import to_user
from tasktracker.infrastructure.persistence.schema import UserRow, utcnow

_UPDATABLE_FIELDS = ("email", "name")


class SqlUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- UserRepository interface ---------------------------------------------

    def find_all(self) -> list[User]:
        stmt = select(UserRow).options(selectinload(UserRow.tasks)).order_by(UserRow.id)
        return [to_user(row) for row in self._session.scalars(stmt)]

    def find_by_id(self, user_id: int) -> User:
        return to_user(self._get_row(user_id))

    def find_by_email(self, email: str) -> User | None:
        stmt = (
            select(UserRow)
            .options(selectinload(UserRow.tasks))
            .where(UserRow.email == email)
        )
        row = self._session.scalars(stmt).first()
        return to_user(row) if row is not None else None

    def exists(self, user_id: int) -> bool:
        return bool(self._session.scalar(select(exists().where(UserRow.id == user_id))))

    def create(self, data: Mapping[str, Any]) -> User:
        row = UserRow(email=data["email"], name=data["name"])
        self._session.add(row)
        self._flush(data.get("email"))
        self._session.refresh(row)
        return to_user(row)

    def update(self, user_id: int, changes: Mapping[str, Any]) -> User:
        row = self._get_row(user_id)
        for field_name in _UPDATABLE_FIELDS:
            if field_name in changes:
                setattr(row, field_name, changes[field_name])
        row.updated_at = utcnow()
        self._flush(changes.get("email"))
        self._session.refresh(row)
        return to_user(row)

    def delete(self, user_id: int) -> None:
        row = self._get_row(user_id)
        # tasks.user_id is ON DELETE CASCADE, so the owned tasks go in
        # the same statement.
        self._session.delete(row)
        self._session.flush()

    # --- Internal helpers -----------------------------------------------------

    def _get_row(self, user_id: int) -> UserRow:
        row = self._session.get(UserRow, user_id, options=[selectinload(UserRow.tasks)])
        if row is None:
            raise EntityNotFoundError(f"User with ID {user_id} not found")
        return row

    def _flush(self, email: str | None) -> None:
        try:
            self._session.flush()
        except IntegrityError as exc:
            self._session.rollback()
            if _is_email_violation(exc):
                raise ConflictError(f"User with email {email} already exists") from exc
            raise


def _is_email_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig).lower()
    return "uq_users_email" in message or "users.email" in message
