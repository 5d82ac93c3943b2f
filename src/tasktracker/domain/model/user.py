"""User entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from tasktracker.domain.model.task import Task


@dataclass
class User:
    """A person who owns tasks.

    ``tasks`` is derived from the tasks table, ordered by creation.  Each
    entry has ``user`` left unset.
    """

    id: int
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
    tasks: list[Task] = field(default_factory=list)
