"""Fixtures for tests that run against a real SQLite store."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from tasktracker.config.settings import Settings
from tasktracker.infrastructure.api.app import create_app
from tasktracker.infrastructure.persistence.database import Database


@pytest.fixture
def database() -> Iterator[Database]:
    """A fresh in-memory database with the schema in place."""
    db = Database("sqlite://")
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture
def settings() -> Settings:
    return Settings(DATABASE_URL="sqlite://", ENV="test", LOG_JSON=False)


@pytest.fixture
def client(settings: Settings, database: Database) -> Iterator[TestClient]:
    app = create_app(settings, database=database)
    with TestClient(app) as test_client:
        yield test_client
