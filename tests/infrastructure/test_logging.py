"""Tests that module-level loggers follow the runtime logging setup."""

import json
import logging

import pytest
import structlog

from tasktracker.application import user_service
from tasktracker.config.logging import configure_logging


@pytest.fixture
def restore_logging():
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


def test_module_logger_honours_level_and_json(capsys, restore_logging):
    # Module loggers are created at import time, before configuration runs.
    configure_logging("WARNING", json=True)

    user_service.logger.debug("debug_event_filtered")
    user_service.logger.warning("warning_event_kept", user_id=7)

    captured = capsys.readouterr()
    assert "debug_event_filtered" not in captured.out + captured.err
    lines = [line for line in captured.err.splitlines() if line.strip()]
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event"] == "warning_event_kept"
    assert record["level"] == "warning"
    assert record["service"] == "tasktracker"
    assert record["user_id"] == 7
