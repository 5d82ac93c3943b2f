"""Application service: User use cases.

Validates input, enforces the email-uniqueness pre-check and delegates
persistence to the repository.  EntityNotFoundError raised by the
repository passes through unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tasktracker.config.logging import get_logger
from tasktracker.domain.exceptions import ConflictError
from tasktracker.domain.model.user import User
from tasktracker.domain.repository.user_repository import UserRepository
from tasktracker.domain.validation import (
    MAX_EMAIL_LENGTH,
    require_text,
    validate_email,
    validate_name,
)

logger = get_logger(__name__)


class UserService:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def get_all(self) -> list[User]:
        logger.debug("users_listed")
        return self._user_repo.find_all()

    def get_by_id(self, user_id: int) -> User:
        logger.debug("user_requested", user_id=user_id)
        return self._user_repo.find_by_id(user_id)

    def create(self, data: Mapping[str, Any]) -> User:
        """Create a user after checking required fields and email format.

        The email lookup is only a fast pre-filter.  Two concurrent creates
        can both pass it; the store's unique constraint decides, and the
        repository reports the loser as ConflictError too.
        """
        # Both required fields are checked before the email format.
        email = require_text(data.get("email"), "Email", MAX_EMAIL_LENGTH)
        name = validate_name(data.get("name"))
        email = validate_email(email)

        if self._user_repo.find_by_email(email) is not None:
            raise ConflictError(f"User with email {email} already exists")

        user = self._user_repo.create({"email": email, "name": name})
        logger.info("user_created", user_id=user.id)
        return user

    def update(self, user_id: int, data: Mapping[str, Any]) -> User:
        """Apply a partial update.

        A changed email is format-checked but not pre-checked for
        uniqueness; a duplicate is caught by the store constraint.
        """
        changes: dict[str, Any] = {}
        if "email" in data:
            changes["email"] = validate_email(data["email"])
        if "name" in data:
            changes["name"] = validate_name(data["name"])

        user = self._user_repo.update(user_id, changes)
        logger.info("user_updated", user_id=user_id, fields=sorted(changes))
        return user

    def delete(self, user_id: int) -> None:
        # Owned tasks go with the user; the repository guarantees it.
        self._user_repo.delete(user_id)
        logger.info("user_deleted", user_id=user_id)
