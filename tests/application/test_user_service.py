"""Tests for the User use cases.

Uses in-memory fake repositories, no database.
"""

import pytest

from tasktracker.application.task_service import TaskService
from tasktracker.application.user_service import UserService
from tasktracker.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)
from tests.fakes import FakeStore, FakeTaskRepository, FakeUserRepository


def _setup() -> tuple[UserService, TaskService, FakeStore]:
    store = FakeStore()
    users = UserService(FakeUserRepository(store))
    tasks = TaskService(FakeTaskRepository(store), FakeUserRepository(store))
    return users, tasks, store


class TestCreateUser:

    def test_assigns_id_and_timestamps(self):
        users, _, _ = _setup()
        user = users.create({"email": "alice@example.com", "name": "Alice"})
        assert user.id == 1
        assert user.created_at is not None
        assert user.updated_at == user.created_at
        assert user.tasks == []

    def test_get_by_id_returns_equal_entity(self):
        users, _, _ = _setup()
        user = users.create({"email": "alice@example.com", "name": "Alice"})
        assert users.get_by_id(user.id) == user

    def test_trims_values(self):
        users, _, _ = _setup()
        user = users.create({"email": " alice@example.com ", "name": "  Alice "})
        assert user.email == "alice@example.com"
        assert user.name == "Alice"

    def test_duplicate_email_conflicts_and_adds_nothing(self):
        users, _, _ = _setup()
        users.create({"email": "alice@example.com", "name": "Alice"})
        with pytest.raises(ConflictError, match="already exists"):
            users.create({"email": "alice@example.com", "name": "Other Alice"})
        assert len(users.get_all()) == 1

    def test_malformed_email_rejected(self):
        users, _, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid email format"):
            users.create({"email": "not-an-email", "name": "Alice"})

    def test_empty_name_rejected(self):
        users, _, _ = _setup()
        with pytest.raises(ValidationError, match="Name is required"):
            users.create({"email": "alice@example.com", "name": ""})

    def test_missing_email_rejected(self):
        users, _, _ = _setup()
        with pytest.raises(ValidationError, match="Email is required"):
            users.create({"name": "Alice"})

    def test_missing_name_reported_before_bad_email_format(self):
        users, _, _ = _setup()
        with pytest.raises(ValidationError, match="Name is required"):
            users.create({"email": "not-an-email"})

    def test_rejected_create_adds_nothing(self):
        users, _, _ = _setup()
        with pytest.raises(ValidationError):
            users.create({"email": "not-an-email", "name": "Alice"})
        assert users.get_all() == []


class TestUpdateUser:

    def test_merges_only_present_fields(self):
        users, _, _ = _setup()
        user = users.create({"email": "alice@example.com", "name": "Alice"})
        updated = users.update(user.id, {"name": "Alice Smith"})
        assert updated.name == "Alice Smith"
        assert updated.email == "alice@example.com"
        assert updated.updated_at > user.updated_at

    def test_revalidates_email_format(self):
        users, _, _ = _setup()
        user = users.create({"email": "alice@example.com", "name": "Alice"})
        with pytest.raises(ValidationError, match="Invalid email format"):
            users.update(user.id, {"email": "nope"})

    def test_explicit_empty_name_rejected(self):
        users, _, _ = _setup()
        user = users.create({"email": "alice@example.com", "name": "Alice"})
        with pytest.raises(ValidationError, match="Name is required"):
            users.update(user.id, {"name": None})

    def test_duplicate_email_caught_by_store(self):
        users, _, _ = _setup()
        users.create({"email": "alice@example.com", "name": "Alice"})
        bob = users.create({"email": "bob@example.com", "name": "Bob"})
        with pytest.raises(ConflictError):
            users.update(bob.id, {"email": "alice@example.com"})

    def test_unknown_user_not_found(self):
        users, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="User with ID 999999 not found"):
            users.update(999999, {"name": "Ghost"})


class TestDeleteUser:

    def test_cascades_to_owned_tasks(self):
        users, tasks, store = _setup()
        alice = users.create({"email": "alice@example.com", "name": "Alice"})
        bob = users.create({"email": "bob@example.com", "name": "Bob"})
        for i in range(3):
            tasks.create({"title": f"Task {i}", "user_id": alice.id})
        kept = tasks.create({"title": "Bob's task", "user_id": bob.id})

        users.delete(alice.id)

        with pytest.raises(EntityNotFoundError):
            users.get_by_id(alice.id)
        assert tasks.get_all(alice.id) == []
        assert [t.id for t in tasks.get_all()] == [kept.id]

    def test_unknown_user_not_found(self):
        users, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            users.delete(999999)


class TestReadUser:

    def test_missing_user_not_found(self):
        users, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            users.get_by_id(999999)

    def test_repeated_reads_are_identical(self):
        users, tasks, _ = _setup()
        user = users.create({"email": "alice@example.com", "name": "Alice"})
        tasks.create({"title": "Write report", "user_id": user.id})
        assert users.get_by_id(user.id) == users.get_by_id(user.id)

    def test_includes_tasks_in_creation_order(self):
        users, tasks, _ = _setup()
        user = users.create({"email": "alice@example.com", "name": "Alice"})
        first = tasks.create({"title": "First", "user_id": user.id})
        second = tasks.create({"title": "Second", "user_id": user.id})
        loaded = users.get_by_id(user.id)
        assert [t.id for t in loaded.tasks] == [first.id, second.id]
