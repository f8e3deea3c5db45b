"""
Unit tests for the Repository helpers that do not touch the database.
"""

import pytest

from taskboard.db.repository import Repository, StorageError, StorageErrorKind
from taskboard.models.team import Team
from taskboard.models.task import Task, TaskStatus


class TestCreate:

    def test_create_builds_transient_entity(self):
        repo = Repository(None, Team, merge_fields=("name",))

        team = repo.create(name="Core")

        assert isinstance(team, Team)
        assert team.name == "Core"
        assert team.id is None


class TestMerge:

    def test_merge_overwrites_supplied_fields_only(self):
        repo = Repository(None, Task, merge_fields=("name", "description", "status"))
        task = Task(name="Old", description="Keep me", status=TaskStatus.PENDING)

        merged = repo.merge(task, {"name": "New", "status": TaskStatus.COMPLETED})

        assert merged is task
        assert task.name == "New"
        assert task.status == TaskStatus.COMPLETED
        assert task.description == "Keep me"

    def test_merge_empty_partial_is_noop(self):
        repo = Repository(None, Team, merge_fields=("name",))
        team = Team(name="Core")

        repo.merge(team, {})

        assert team.name == "Core"

    def test_merge_rejects_unknown_fields(self):
        repo = Repository(None, Team, merge_fields=("name",))
        team = Team(name="Core")

        with pytest.raises(ValueError, match="id"):
            repo.merge(team, {"id": 99})

        assert team.id is None


class TestStorageError:

    def test_storage_error_keeps_kind_and_detail(self):
        error = StorageError(StorageErrorKind.CONSTRAINT_VIOLATION, "UNIQUE constraint failed: teams.name")

        assert error.kind == StorageErrorKind.CONSTRAINT_VIOLATION
        assert error.detail == "UNIQUE constraint failed: teams.name"
        assert str(error) == error.detail
