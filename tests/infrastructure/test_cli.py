"""Tests for the command-line entry point."""

from click.testing import CliRunner
from sqlalchemy import create_engine, inspect

from tasktracker.infrastructure import bootstrap
from tasktracker.infrastructure.cli.main import cli


def test_init_db_creates_tables(tmp_path, monkeypatch):
    # Keep the process-wide logging setup out of the runner's streams.
    monkeypatch.setattr(bootstrap, "configure_logging", lambda *args, **kwargs: None)
    db_file = tmp_path / "tasks.sqlite"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["init-db"],
        env={"DATABASE_URL": f"sqlite:///{db_file}", "LOG_JSON": "false"},
    )
    assert result.exit_code == 0, result.output
    assert "Schema ready" in result.output

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        assert set(inspect(engine).get_table_names()) >= {"users", "tasks"}
    finally:
        engine.dispose()


def test_help_lists_commands():
    result = CliRunner().invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "serve" in result.output
    assert "init-db" in result.output
