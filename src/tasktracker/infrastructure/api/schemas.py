"""Request and response bodies for the HTTP API.

Field names are camelCase on the wire and snake_case in Python.  Request
bodies declare every field optional: the services own the required-field
rules, and only the fields the client actually sent are passed on.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tasktracker.domain.model.task import TaskStatus


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def present_fields(self) -> dict:
        """Fields the client sent, keyed by their Python names."""
        return self.model_dump(exclude_unset=True)


# --- Requests -------------------------------------------------------------------


class UserPayload(ApiModel):
    email: str | None = None
    name: str | None = None


class TaskPayload(ApiModel):
    title: str | None = None
    description: str | None = None
    status: str | None = None
    user_id: int | None = None


class TaskStatusPayload(ApiModel):
    status: str | None = None


# --- Responses ------------------------------------------------------------------


class UserSummaryResponse(ApiModel):
    id: int
    email: str
    name: str
    created_at: datetime
    updated_at: datetime


class TaskSummaryResponse(ApiModel):
    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    user_id: int
    created_at: datetime
    updated_at: datetime


class UserResponse(UserSummaryResponse):
    tasks: list[TaskSummaryResponse] = []


class TaskResponse(TaskSummaryResponse):
    user: UserSummaryResponse | None = None


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
