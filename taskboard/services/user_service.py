"""
User directory.

Owns User rows and resolves users by id or by username. Other services
use `find_by_user_name` to turn a username into a User before attaching it.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.errors import ConflictError, NotFoundError
from taskboard.db.repository import Repository, StorageError
from taskboard.logging import get_logger
from taskboard.models.user import User, UserRelation
from taskboard.schemas.user import UserCreate, UserUpdate

logger = get_logger(__name__)

USER_RELATIONS = (UserRelation.TEAMS, UserRelation.TASKS)


class UserService:

    def __init__(self, db: AsyncSession):
        self.repo = Repository(db, User, merge_fields=("user_name", "name"))

    async def find_all(self) -> List[User]:
        return await self.repo.find(relations=USER_RELATIONS)

    async def find_one(self, user_id: int) -> User:
        user = await self.repo.find_one(User.id == user_id, relations=USER_RELATIONS)
        if not user:
            raise NotFoundError(f"User #{user_id} not found")
        return user

    async def find_by_user_name(self, user_name: str) -> Optional[User]:
        """Lookup by username. Returns None instead of raising."""
        return await self.repo.find_one(User.user_name == user_name, relations=USER_RELATIONS)

    async def create(self, payload: UserCreate) -> User:
        user = self.repo.create(**payload.model_dump())
        try:
            user = await self.repo.save(user)
        except StorageError as e:
            logger.warning("User not created", user_name=payload.user_name, reason=e.kind.value)
            raise ConflictError(e.detail) from e
        logger.info("User created", user_id=user.id, user_name=user.user_name)
        return user

    async def update(self, user_name: str, payload: UserUpdate) -> User:
        user = await self.repo.find_one_by(user_name=user_name)
        if not user:
            raise NotFoundError(f"User with username {user_name} not found")

        self.repo.merge(user, payload.model_dump(exclude_unset=True, exclude_none=True))
        try:
            return await self.repo.save(user)
        except StorageError as e:
            logger.warning("User not updated", user_name=user_name, reason=e.kind.value)
            raise ConflictError(e.detail) from e

    async def delete(self, user_name: str) -> User:
        """Remove the user and return the record as it was before deletion."""
        user = await self.repo.find_one_by(user_name=user_name)
        if not user:
            raise NotFoundError(f"User {user_name} not found")
        try:
            await self.repo.delete(user)
        except StorageError as e:
            logger.warning("User not deleted", user_name=user_name, reason=e.kind.value)
            raise ConflictError(e.detail) from e
        logger.info("User deleted", user_name=user_name)
        return user
