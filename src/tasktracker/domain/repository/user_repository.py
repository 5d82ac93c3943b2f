"""Abstract repository for the User entity.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (SQL, in-memory) live
elsewhere and are handed to the services at construction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from tasktracker.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every user, each with its tasks."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> User:
        """Return a user with its tasks.

        Raises EntityNotFoundError if no such user exists.
        """

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Return the user with exactly this email, or None."""

    @abstractmethod
    def exists(self, user_id: int) -> bool:
        """Return True if a user with this id exists."""

    @abstractmethod
    def create(self, data: Mapping[str, Any]) -> User:
        """Persist a new user and return it with id and timestamps.

        Raises ConflictError if the email is already taken.
        """

    @abstractmethod
    def update(self, user_id: int, changes: Mapping[str, Any]) -> User:
        """Merge the fields present in *changes* onto the stored user.

        Raises EntityNotFoundError if no such user exists and
        ConflictError if the new email is already taken.
        """

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Remove the user and every task it owns in one step.

        Raises EntityNotFoundError if no such user exists.
        """
