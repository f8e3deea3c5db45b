"""
Task board.

Tasks reference a project, a creator and (optionally) a responsible user.
Users are referenced by username and resolved through the user directory
before they are attached. Deleting a task only flags it as deleted.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.errors import ConflictError, NotFoundError
from taskboard.db.repository import Repository, StorageError
from taskboard.logging import get_logger
from taskboard.models.task import Task, TaskRelation
from taskboard.models.user import User
from taskboard.schemas.task import TaskCreate, TaskFilters, TaskUpdate
from taskboard.services.project_service import ProjectService
from taskboard.services.user_service import UserService

logger = get_logger(__name__)

TASK_RELATIONS = (
    TaskRelation.PROJECT,
    TaskRelation.RESPONSIBLE,
    TaskRelation.CREATOR,
    TaskRelation.COMMENTS,
)


def build_task_criteria(filters: Optional[TaskFilters]) -> list:
    """
    Translate list filters into WHERE criteria.

    Only supplied filters produce a criterion; the query ANDs them.
    """
    if filters is None:
        return []

    criteria = []
    if filters.filter_name:
        criteria.append(Task.name.icontains(filters.filter_name, autoescape=True))
    if filters.filter_responsible:
        criteria.append(Task.responsible.has(User.user_name == filters.filter_responsible))
    if filters.filter_status is not None:
        criteria.append(Task.status == filters.filter_status)
    if filters.filter_project is not None:
        criteria.append(Task.project_id == filters.filter_project)
    if filters.filter_deleted is not None:
        criteria.append(Task.deleted == filters.filter_deleted)
    return criteria


class TaskService:

    def __init__(self, db: AsyncSession, projects: ProjectService, users: UserService):
        self.repo = Repository(
            db,
            Task,
            merge_fields=("name", "description", "status", "responsible", "deleted"),
        )
        self.projects = projects
        self.users = users

    async def find_all(self, filters: Optional[TaskFilters] = None) -> List[Task]:
        return await self.repo.find(*build_task_criteria(filters), relations=TASK_RELATIONS)

    async def find_one(self, task_id: int) -> Task:
        task = await self.repo.find_one(Task.id == task_id, relations=TASK_RELATIONS)
        if not task:
            raise NotFoundError(f"Task #{task_id} not found")
        return task

    async def find_by_name(self, name: str) -> Optional[Task]:
        tasks = await self.repo.find(Task.name == name, relations=TASK_RELATIONS, limit=1)
        return tasks[0] if tasks else None

    async def _resolve_user(self, user_name: str) -> User:
        user = await self.users.find_by_user_name(user_name)
        if not user:
            raise NotFoundError(f"User {user_name} not found")
        return user

    async def create(self, payload: TaskCreate) -> Task:
        project = await self.projects.find_one(payload.project_id)
        creator = await self._resolve_user(payload.creator_user)
        responsible = None
        if payload.responsible_user:
            responsible = await self._resolve_user(payload.responsible_user)

        task = self.repo.create(
            name=payload.name,
            description=payload.description,
            status=payload.status,
            project=project,
            creator=creator,
            responsible=responsible,
        )
        try:
            task = await self.repo.save(task)
        except StorageError as e:
            logger.warning("Task not created", name=payload.name, reason=e.kind.value)
            raise ConflictError(e.detail) from e
        logger.info("Task created", task_id=task.id, project_id=task.project_id)
        return task

    async def update(self, task_id: int, payload: TaskUpdate) -> Task:
        task = await self.repo.find_one_by(id=task_id)
        if not task:
            raise NotFoundError(f"Task #{task_id} not found")

        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        responsible_user = changes.pop("responsible_user", None)
        if responsible_user is not None:
            changes["responsible"] = await self._resolve_user(responsible_user)

        self.repo.merge(task, changes)
        try:
            return await self.repo.save(task)
        except StorageError as e:
            logger.warning("Task not updated", task_id=task_id, reason=e.kind.value)
            raise ConflictError(e.detail) from e

    async def delete(self, task_id: int) -> Task:
        """Soft delete: the row stays, flagged as deleted."""
        task = await self.repo.find_one_by(id=task_id)
        if not task:
            raise NotFoundError(f"Task #{task_id} not found")

        self.repo.merge(task, {"deleted": True})
        try:
            task = await self.repo.save(task)
        except StorageError as e:
            raise ConflictError(e.detail) from e
        logger.info("Task deleted", task_id=task_id)
        return task
