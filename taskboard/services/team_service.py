"""
Team registry.

Owns Team rows and Team <-> User membership.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.errors import ConflictError, NotFoundError
from taskboard.db.repository import Repository, StorageError
from taskboard.logging import get_logger
from taskboard.models.team import Team, TeamRelation
from taskboard.models.user import User
from taskboard.schemas.team import TeamCreate, TeamUpdate
from taskboard.services.user_service import UserService

logger = get_logger(__name__)

TEAM_RELATIONS = (TeamRelation.USERS, TeamRelation.PROJECTS)


class TeamService:

    def __init__(self, db: AsyncSession, users: UserService):
        self.repo = Repository(db, Team, merge_fields=("name",))
        self.users = users

    async def find_all(self) -> List[Team]:
        return await self.repo.find(relations=TEAM_RELATIONS)

    async def find_one(self, team_id: int) -> Team:
        team = await self.repo.find_one(Team.id == team_id, relations=TEAM_RELATIONS)
        if not team:
            raise NotFoundError(f"Team #{team_id} not found")
        return team

    async def find_by_name(self, name: str) -> Optional[Team]:
        return await self.repo.find_one(Team.name == name, relations=TEAM_RELATIONS)

    async def create(self, payload: TeamCreate) -> Team:
        team = self.repo.create(**payload.model_dump())
        try:
            team = await self.repo.save(team)
        except StorageError as e:
            logger.warning("Team not created", name=payload.name, reason=e.kind.value)
            raise ConflictError(e.detail) from e
        logger.info("Team created", team_id=team.id, name=team.name)
        return team

    async def update(self, team_id: int, payload: TeamUpdate) -> Team:
        team = await self.repo.find_one_by(id=team_id)
        if not team:
            raise NotFoundError(f"Team #{team_id} not found")

        self.repo.merge(team, payload.model_dump(exclude_unset=True, exclude_none=True))
        try:
            return await self.repo.save(team)
        except StorageError as e:
            logger.warning("Team not updated", team_id=team_id, reason=e.kind.value)
            raise ConflictError(e.detail) from e

    async def delete(self, team_id: int) -> Team:
        team = await self.repo.find_one_by(id=team_id)
        if not team:
            raise NotFoundError(f"Team #{team_id} not found")
        try:
            await self.repo.delete(team)
        except StorageError as e:
            logger.warning("Team not deleted", team_id=team_id, reason=e.kind.value)
            raise ConflictError(e.detail) from e
        logger.info("Team deleted", team_id=team_id)
        return team

    # ==================== Membership ====================

    async def add_user(self, team_id: int, user_name: str) -> User:
        """
        Add an existing user to the team.

        Raises:
            NotFoundError: team or user does not exist
            ConflictError: user is already a member
        """
        team = await self.find_one(team_id)

        user = await self.users.find_by_user_name(user_name)
        if not user:
            raise NotFoundError(f"User {user_name} not found")

        if any(member.id == user.id for member in team.users):
            logger.warning("Duplicate membership rejected", team_id=team_id, user_name=user_name)
            raise ConflictError(f"User {user_name} is already a member of team #{team_id}")

        team.users.append(user)
        try:
            await self.repo.save(team)
        except StorageError as e:
            raise ConflictError(e.detail) from e
        logger.info("User added to team", team_id=team_id, user_name=user_name)
        return user

    async def remove_user(self, team_id: int, user_name: str) -> User:
        """
        Remove a member from the team.

        Raises:
            NotFoundError: team or user does not exist, or the user is not
                a member of this team
        """
        team = await self.repo.find_one(Team.id == team_id, relations=(TeamRelation.USERS,))
        if not team:
            raise NotFoundError(f"Team #{team_id} not found")

        user = await self.users.find_by_user_name(user_name)
        if not user:
            raise NotFoundError(f"User {user_name} not found")

        member = next((m for m in team.users if m.user_name == user.user_name), None)
        if member is None:
            raise NotFoundError(f"User {user_name} is not a member of team #{team_id}")

        team.users.remove(member)
        try:
            await self.repo.save(team)
        except StorageError as e:
            raise ConflictError(e.detail) from e
        logger.info("User removed from team", team_id=team_id, user_name=user_name)
        return member
