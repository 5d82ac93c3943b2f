"""Abstract repository for the Task entity."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from tasktracker.domain.model.task import Task


class TaskRepository(ABC):

    @abstractmethod
    def find_all(self, user_id: int | None = None) -> list[Task]:
        """Return tasks newest first, optionally only those of one user."""

    @abstractmethod
    def find_by_id(self, task_id: int) -> Task:
        """Return a task with its owner.

        Raises EntityNotFoundError if no such task exists.
        """

    @abstractmethod
    def create(self, data: Mapping[str, Any]) -> Task:
        """Persist a new task and return it with id and timestamps.

        Raises ValidationError if ``user_id`` references no user.
        """

    @abstractmethod
    def update(self, task_id: int, changes: Mapping[str, Any]) -> Task:
        """Merge the fields present in *changes* onto the stored task.

        Raises EntityNotFoundError if no such task exists.
        """

    @abstractmethod
    def delete(self, task_id: int) -> None:
        """Remove a task.

        Raises EntityNotFoundError if no such task exists.
        """
