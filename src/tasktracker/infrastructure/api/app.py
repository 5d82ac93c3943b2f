"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasktracker.config.logging import get_logger
from tasktracker.config.settings import Settings
from tasktracker.infrastructure import bootstrap
from tasktracker.infrastructure.api import health_routes, task_routes, user_routes
from tasktracker.infrastructure.api.errors import register_error_handlers
from tasktracker.infrastructure.api.middleware import request_logging_middleware
from tasktracker.infrastructure.persistence.database import Database

logger = get_logger(__name__)


def create_app(settings: Settings, database: Database | None = None) -> FastAPI:
    """Build the application around an explicit store handle.

    When *database* is omitted one is built from *settings*.  Outside
    production the schema is created on startup.
    """
    db = database if database is not None else bootstrap.database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if not settings.is_production:
            db.create_schema()
        logger.info("server_started", env=settings.env, api_prefix=settings.api_prefix)
        yield
        if database is None:
            db.dispose()
        logger.info("server_stopped")

    app = FastAPI(
        title="Task Tracker",
        description="Users and their tasks",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = db
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_logging_middleware)

    register_error_handlers(app)

    app.include_router(health_routes.router)
    app.include_router(user_routes.router, prefix=settings.api_prefix)
    app.include_router(task_routes.router, prefix=settings.api_prefix)

    return app
