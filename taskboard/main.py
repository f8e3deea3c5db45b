from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard import __version__
from taskboard.api.endpoints import users, teams, projects, tasks, comments
from taskboard.api.error_handlers import register_error_handlers
from taskboard.core.config import settings
from taskboard.core.logging import init_sentry, setup_logging
from taskboard.db.base import Base
from taskboard.db.session import engine
from taskboard.helpers.getters import isDebugMode
from taskboard.logging import get_logger
from taskboard.middleware.logging import AccessLoggingMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.great("Task board service is listening", host=settings.HOST, port=settings.PORT)
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## Task Board Service

Manages **Users**, **Teams**, **Projects**, **Tasks** and **Comments**.

- Users are referenced by username wherever another entity points at them
- Teams own projects; users join teams through membership endpoints
- Tasks belong to a project, have a creator and an optional responsible user
- Deleting a task flags it as deleted instead of removing it

Errors: `404` when an entity (or a membership) does not exist, `409` when a
uniqueness or referential constraint is violated.
    """,
    version=__version__,
    lifespan=lifespan,
)

# Initialize logging and error tracking
setup_logging()
init_sentry()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request logging is optional in debug mode
app.add_middleware(AccessLoggingMiddleware, enabled=not isDebugMode())

register_error_handlers(app)

app.include_router(users.router, prefix="/api/users", tags=["users"])
app.include_router(teams.router, prefix="/api/teams", tags=["teams"])
app.include_router(projects.router, prefix="/api/projects", tags=["projects"])
app.include_router(tasks.router, prefix="/api/tasks", tags=["tasks"])
app.include_router(comments.router, prefix="/api/comments", tags=["comments"])


@app.get("/")
def root():
    return {"message": f"{settings.PROJECT_NAME} {__version__}. See /docs for the OpenAPI schema."}


@app.get("/health")
def health():
    return {"status": "ok"}


def run():
    uvicorn.run("taskboard.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
