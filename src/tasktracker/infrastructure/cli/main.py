"""Command-line entry point."""

from __future__ import annotations

import click
import uvicorn

from tasktracker.infrastructure import bootstrap
from tasktracker.infrastructure.api.app import create_app


@click.group()
def cli() -> None:
    """Task Tracker: users and their tasks over HTTP."""


@cli.command("serve")
@click.option("--host", default=None, help="Interface to bind (defaults to HOST).")
@click.option("--port", default=None, type=int, help="Port to listen on (defaults to PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    settings = bootstrap.load_settings()
    app = create_app(settings)
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )


@cli.command("init-db")
def init_db() -> None:
    """Create the database schema if it does not exist."""
    settings = bootstrap.load_settings()
    database = bootstrap.database(settings)
    try:
        database.create_schema()
    finally:
        database.dispose()
    click.echo(f"Schema ready at {database.engine.url.render_as_string(hide_password=True)}")
