"""The store handle: one engine plus a session factory.

A Database is created by the composition root and handed to whatever
needs sessions.  Every unit of work goes through ``session()``, which
commits on success and rolls back on any exception.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tasktracker.config.logging import get_logger
from tasktracker.infrastructure.persistence.schema import Base

logger = get_logger(__name__)


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def build_engine(url: str, echo: bool = False) -> Engine:
    connect_args: dict[str, object] = {}
    kwargs: dict[str, object] = {}

    if url.startswith("sqlite"):
        # Requests are served from a thread pool.
        connect_args["check_same_thread"] = False
        if _is_memory_sqlite(url):
            # One shared connection, otherwise each checkout sees an empty db.
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(url, echo=echo, connect_args=connect_args, **kwargs)

    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def _enable_sqlite_foreign_keys(dbapi_conn, _) -> None:
    # SQLite ignores FOREIGN KEY clauses, ON DELETE CASCADE included,
    # unless this is switched on for every connection.
    cursor = dbapi_conn.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


class Database:

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.engine = build_engine(url, echo=echo)
        self._session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

    def create_schema(self) -> None:
        Base.metadata.create_all(self.engine)
        logger.info("schema_created", tables=sorted(Base.metadata.tables))

    def drop_schema(self) -> None:
        Base.metadata.drop_all(self.engine)

    @contextlib.contextmanager
    def session(self) -> Iterator[Session]:
        """Unit of work: commit on success, roll back and re-raise on error."""
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
