"""
Comment log.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.errors import ConflictError, NotFoundError
from taskboard.db.repository import Repository, StorageError
from taskboard.logging import get_logger
from taskboard.models.comment import Comment, CommentRelation
from taskboard.models.user import User
from taskboard.schemas.comment import CommentCreate, CommentUpdate
from taskboard.services.task_service import TaskService
from taskboard.services.user_service import UserService

logger = get_logger(__name__)

COMMENT_RELATIONS = (CommentRelation.AUTHOR,)


class CommentService:

    def __init__(self, db: AsyncSession, users: UserService, tasks: TaskService):
        self.repo = Repository(db, Comment, merge_fields=("content", "author", "task"))
        self.users = users
        self.tasks = tasks

    async def find_all(self) -> List[Comment]:
        return await self.repo.find(relations=COMMENT_RELATIONS)

    async def find_one(self, comment_id: int) -> Comment:
        comment = await self.repo.find_one(Comment.id == comment_id, relations=COMMENT_RELATIONS)
        if not comment:
            raise NotFoundError(f"Comment #{comment_id} not found")
        return comment

    async def _resolve_author(self, user_name: str) -> User:
        author = await self.users.find_by_user_name(user_name)
        if not author:
            raise NotFoundError(f"User {user_name} not found")
        return author

    async def create(self, payload: CommentCreate) -> Comment:
        author = await self._resolve_author(payload.user_name)
        task = await self.tasks.find_one(payload.task_id)

        comment = self.repo.create(content=payload.content, author=author, task=task)
        try:
            comment = await self.repo.save(comment)
        except StorageError as e:
            raise ConflictError(e.detail) from e
        logger.info("Comment created", comment_id=comment.id, task_id=comment.task_id)
        return comment

    async def update(self, comment_id: int, payload: CommentUpdate) -> Comment:
        comment = await self.repo.find_one_by(id=comment_id)
        if not comment:
            raise NotFoundError(f"Comment #{comment_id} not found")

        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        user_name = changes.pop("user_name", None)
        if user_name is not None:
            changes["author"] = await self._resolve_author(user_name)
        task_id = changes.pop("task_id", None)
        if task_id is not None:
            changes["task"] = await self.tasks.find_one(task_id)

        self.repo.merge(comment, changes)
        try:
            return await self.repo.save(comment)
        except StorageError as e:
            logger.warning("Comment not updated", comment_id=comment_id, reason=e.kind.value)
            raise ConflictError(e.detail) from e

    async def delete(self, comment_id: int) -> Comment:
        comment = await self.repo.find_one_by(id=comment_id)
        if not comment:
            raise NotFoundError(f"Comment #{comment_id} not found")
        try:
            await self.repo.delete(comment)
        except StorageError as e:
            raise ConflictError(e.detail) from e
        logger.info("Comment deleted", comment_id=comment_id)
        return comment
