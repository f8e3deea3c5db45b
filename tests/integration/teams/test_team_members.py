"""
Integration tests for team member management.

Tests:
- POST /api/teams/{team_id}/members/{user_name} - Add member
- DELETE /api/teams/{team_id}/members/{user_name} - Remove member
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import TeamFactory


@pytest.mark.asyncio
class TestAddTeamMember:
    """Test POST /api/teams/{team_id}/members/{user_name}."""

    async def test_add_member_success(self, client: AsyncClient, team, alice):
        response = await client.post(f"/api/teams/{team.id}/members/alice")

        assert response.status_code == 201
        assert response.json()["user_name"] == "alice"

        team_data = (await client.get(f"/api/teams/{team.id}")).json()
        assert [u["user_name"] for u in team_data["users"]] == ["alice"]

        user_data = (await client.get("/api/users/by-username/alice")).json()
        assert [t["name"] for t in user_data["teams"]] == ["Core Team"]

    async def test_add_member_twice(self, client: AsyncClient, team, alice):
        team_id = team.id

        first = await client.post(f"/api/teams/{team_id}/members/alice")
        second = await client.post(f"/api/teams/{team_id}/members/alice")

        assert first.status_code == 201
        assert second.status_code == 409
        team_data = (await client.get(f"/api/teams/{team_id}")).json()
        assert len(team_data["users"]) == 1

    async def test_add_unknown_user(self, client: AsyncClient, team):
        response = await client.post(f"/api/teams/{team.id}/members/ghost")

        assert response.status_code == 404

    async def test_add_member_to_missing_team(self, client: AsyncClient, alice):
        response = await client.post("/api/teams/99999/members/alice")

        assert response.status_code == 404


@pytest.mark.asyncio
class TestRemoveTeamMember:
    """Test DELETE /api/teams/{team_id}/members/{user_name}."""

    async def test_remove_member_success(self, client: AsyncClient, db_session: AsyncSession, alice, bob):
        crew = await TeamFactory.create_with_members_async(db_session, [alice, bob], name="Crew")
        await db_session.commit()

        response = await client.delete(f"/api/teams/{crew.id}/members/bob")

        assert response.status_code == 200
        assert response.json()["user_name"] == "bob"
        team_data = (await client.get(f"/api/teams/{crew.id}")).json()
        assert [u["user_name"] for u in team_data["users"]] == ["alice"]

    async def test_remove_non_member(self, client: AsyncClient, team, alice):
        response = await client.delete(f"/api/teams/{team.id}/members/alice")

        assert response.status_code == 404
        assert "not a member" in response.json()["detail"]

    async def test_remove_unknown_user(self, client: AsyncClient, team):
        response = await client.delete(f"/api/teams/{team.id}/members/ghost")

        assert response.status_code == 404

    async def test_remove_from_missing_team(self, client: AsyncClient, alice):
        response = await client.delete("/api/teams/99999/members/alice")

        assert response.status_code == 404
