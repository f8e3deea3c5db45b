"""
Integration tests for UserService against an in-memory database.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.errors import ConflictError, NotFoundError
from taskboard.schemas.user import UserCreate, UserUpdate
from taskboard.services.user_service import UserService
from tests.factories import UserFactory


@pytest.mark.asyncio
class TestUserLookups:

    async def test_find_one_missing_raises_not_found(self, user_service: UserService):
        with pytest.raises(NotFoundError) as exc_info:
            await user_service.find_one(999)

        assert "#999" in exc_info.value.message

    async def test_find_by_user_name_missing_returns_none(self, user_service: UserService):
        assert await user_service.find_by_user_name("ghost") is None

    async def test_find_by_user_name_loads_teams_and_tasks(self, user_service: UserService, task, bob):
        user = await user_service.find_by_user_name("bob")

        assert user.id == bob.id
        assert [t.name for t in user.tasks] == ["Write migrations"]
        assert user.teams == []

    async def test_find_all_ordered_by_id(self, user_service: UserService, db_session: AsyncSession):
        first = await UserFactory.create_async(db_session, user_name="zed")
        second = await UserFactory.create_async(db_session, user_name="amy")
        await db_session.commit()

        users = await user_service.find_all()

        assert [u.id for u in users] == [first.id, second.id]


@pytest.mark.asyncio
class TestUserWrites:

    async def test_create_then_find_one(self, user_service: UserService):
        created = await user_service.create(UserCreate(user_name="carol", name="Carol"))

        found = await user_service.find_one(created.id)

        assert found.user_name == "carol"
        assert found.name == "Carol"

    async def test_create_duplicate_user_name_conflicts(self, user_service: UserService, alice):
        with pytest.raises(ConflictError):
            await user_service.create(UserCreate(user_name="alice"))

    async def test_update_with_empty_partial_keeps_fields(self, user_service: UserService, alice):
        updated = await user_service.update("alice", UserUpdate())

        assert updated.user_name == "alice"
        assert updated.name == "Alice"

    async def test_update_name_only(self, user_service: UserService, alice):
        updated = await user_service.update("alice", UserUpdate(name="Alice Liddell"))

        assert updated.name == "Alice Liddell"
        assert updated.user_name == "alice"

    async def test_update_missing_user(self, user_service: UserService):
        with pytest.raises(NotFoundError):
            await user_service.update("ghost", UserUpdate(name="Ghost"))

    async def test_update_to_taken_user_name_conflicts(self, user_service: UserService, alice, bob):
        with pytest.raises(ConflictError):
            await user_service.update("alice", UserUpdate(user_name="bob"))

    async def test_delete_returns_snapshot(self, user_service: UserService, alice):
        alice_id = alice.id

        deleted = await user_service.delete("alice")

        assert deleted.id == alice_id
        assert deleted.user_name == "alice"
        assert await user_service.find_by_user_name("alice") is None

    async def test_delete_missing_user(self, user_service: UserService):
        with pytest.raises(NotFoundError):
            await user_service.delete("ghost")

    async def test_delete_task_creator_conflicts(self, user_service: UserService, task):
        """A user who still created tasks cannot be removed."""
        with pytest.raises(ConflictError):
            await user_service.delete("alice")
