"""Liveness endpoint, mounted outside the API prefix."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from tasktracker.infrastructure.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))
