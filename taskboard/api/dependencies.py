from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.db.session import SessionAsync
from taskboard.services.comment_service import CommentService
from taskboard.services.project_service import ProjectService
from taskboard.services.task_service import TaskService
from taskboard.services.team_service import TeamService
from taskboard.services.user_service import UserService


async def get_db():
    async with SessionAsync() as session:
        yield session


# ==================== Service Dependencies ====================
# FastAPI caches get_db per request, so every service built for one request
# shares the same session and unit of work.

def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


def get_team_service(
    db: AsyncSession = Depends(get_db),
    users: UserService = Depends(get_user_service),
) -> TeamService:
    return TeamService(db, users)


def get_project_service(
    db: AsyncSession = Depends(get_db),
    teams: TeamService = Depends(get_team_service),
) -> ProjectService:
    return ProjectService(db, teams)


def get_task_service(
    db: AsyncSession = Depends(get_db),
    projects: ProjectService = Depends(get_project_service),
    users: UserService = Depends(get_user_service),
) -> TaskService:
    return TaskService(db, projects, users)


def get_comment_service(
    db: AsyncSession = Depends(get_db),
    users: UserService = Depends(get_user_service),
    tasks: TaskService = Depends(get_task_service),
) -> CommentService:
    return CommentService(db, users, tasks)
