"""Task entity and its status enum.

A Task always belongs to exactly one User.  The owning user is resolved
on the read path only; writes reference the owner through ``user_id``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from tasktracker.domain.exceptions import ValidationError

if TYPE_CHECKING:
    from tasktracker.domain.model.user import User


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: object) -> TaskStatus:
        """Return the member for *value*, rejecting anything else.

        Any status may follow any other; there is no transition graph.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(
                f"Invalid task status. Must be one of: {allowed}",
                details={"status": value, "allowed": [s.value for s in cls]},
            ) from None


@dataclass
class Task:
    """A unit of work owned by a user.

    ``user`` is populated by the repository on reads; it is a summary of
    the owner whose own ``tasks`` list is left empty to avoid a cycle.
    """

    id: int
    title: str
    user_id: int
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    user: User | None = None
