"""Unit tests for the TaskStatus enum."""

import pytest

from tasktracker.domain.exceptions import ValidationError
from tasktracker.domain.model.task import TaskStatus


class TestParse:

    @pytest.mark.parametrize("raw", ["pending", "in_progress", "completed"])
    def test_valid_literals(self, raw):
        assert TaskStatus.parse(raw).value == raw

    def test_member_passes_through(self):
        assert TaskStatus.parse(TaskStatus.COMPLETED) is TaskStatus.COMPLETED

    @pytest.mark.parametrize("raw", ["bogus", "PENDING", "", None, 3])
    def test_anything_else_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid task status") as exc_info:
            TaskStatus.parse(raw)
        assert exc_info.value.details["allowed"] == ["pending", "in_progress", "completed"]

    def test_values_are_plain_strings(self):
        assert TaskStatus.IN_PROGRESS == "in_progress"
