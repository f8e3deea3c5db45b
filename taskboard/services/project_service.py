"""
Project catalog.

Every project belongs to exactly one team, resolved through the team
registry on create and when the team changes.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.errors import ConflictError, NotFoundError
from taskboard.db.repository import Repository, StorageError
from taskboard.logging import get_logger
from taskboard.models.project import Project, ProjectRelation
from taskboard.schemas.project import ProjectCreate, ProjectUpdate
from taskboard.services.team_service import TeamService

logger = get_logger(__name__)

PROJECT_RELATIONS = (ProjectRelation.TEAM, ProjectRelation.TASKS)


class ProjectService:

    def __init__(self, db: AsyncSession, teams: TeamService):
        self.repo = Repository(db, Project, merge_fields=("name", "description", "team"))
        self.teams = teams

    async def find_all(self) -> List[Project]:
        return await self.repo.find(relations=PROJECT_RELATIONS)

    async def find_one(self, project_id: int) -> Project:
        project = await self.repo.find_one(Project.id == project_id, relations=PROJECT_RELATIONS)
        if not project:
            raise NotFoundError(f"Project #{project_id} not found")
        return project

    async def find_by_name(self, name: str) -> Optional[Project]:
        """
        First project with this name, or None.

        Project names are not unique; callers use this as an existence check.
        """
        projects = await self.repo.find(Project.name == name, relations=PROJECT_RELATIONS, limit=1)
        return projects[0] if projects else None

    async def create(self, payload: ProjectCreate) -> Project:
        team = await self.teams.find_one(payload.team_id)

        project = self.repo.create(**payload.model_dump(exclude={"team_id"}), team=team)
        try:
            project = await self.repo.save(project)
        except StorageError as e:
            logger.warning("Project not created", name=payload.name, reason=e.kind.value)
            raise ConflictError(e.detail) from e
        logger.info("Project created", project_id=project.id, team_id=project.team_id)
        return project

    async def update(self, project_id: int, payload: ProjectUpdate) -> Project:
        project = await self.repo.find_one_by(id=project_id)
        if not project:
            raise NotFoundError(f"Project #{project_id} not found")

        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        team_id = changes.pop("team_id", None)
        if team_id is not None:
            changes["team"] = await self.teams.find_one(team_id)

        self.repo.merge(project, changes)
        try:
            return await self.repo.save(project)
        except StorageError as e:
            logger.warning("Project not updated", project_id=project_id, reason=e.kind.value)
            raise ConflictError(e.detail) from e

    async def delete(self, project_id: int) -> Project:
        project = await self.repo.find_one_by(id=project_id)
        if not project:
            raise NotFoundError(f"Project #{project_id} not found")
        try:
            await self.repo.delete(project)
        except StorageError as e:
            logger.warning("Project not deleted", project_id=project_id, reason=e.kind.value)
            raise ConflictError(e.detail) from e
        logger.info("Project deleted", project_id=project_id)
        return project
