"""
Global test fixtures and configuration.

This module provides base fixtures for all tests:
- Fresh in-memory SQLite database per test
- Database session shared by factories, services and the HTTP client
- Service instances wired together like the API wires them
- HTTP client with dependency overrides
- Base data fixtures (users, team, project, task)
"""

import os
import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables BEFORE importing app
os.environ["MODE"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("SENTRY_DSN", None)

from taskboard.main import app
from taskboard.api.dependencies import get_db
from taskboard.db.base import Base
from taskboard.services.comment_service import CommentService
from taskboard.services.project_service import ProjectService
from taskboard.services.task_service import TaskService
from taskboard.services.team_service import TeamService
from taskboard.services.user_service import UserService

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ==================== Database ====================

@pytest.fixture
async def test_engine():
    """
    Create an isolated in-memory database for one test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        echo=False  # Set to True for SQL debugging
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
    session = session_factory()

    yield session

    await session.close()


# ==================== Services ====================

@pytest.fixture
def user_service(db_session) -> UserService:
    return UserService(db_session)


@pytest.fixture
def team_service(db_session, user_service) -> TeamService:
    return TeamService(db_session, user_service)


@pytest.fixture
def project_service(db_session, team_service) -> ProjectService:
    return ProjectService(db_session, team_service)


@pytest.fixture
def task_service(db_session, project_service, user_service) -> TaskService:
    return TaskService(db_session, project_service, user_service)


@pytest.fixture
def comment_service(db_session, user_service, task_service) -> CommentService:
    return CommentService(db_session, user_service, task_service)


# ==================== FastAPI Client ====================

@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create HTTP client for testing FastAPI endpoints.

    Overrides get_db to use the test session.
    """

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ==================== Base Data Fixtures ====================

@pytest.fixture
async def alice(db_session: AsyncSession):
    from tests.factories.user import UserFactory
    user = await UserFactory.create_async(db_session, user_name="alice", name="Alice")
    await db_session.commit()
    return user


@pytest.fixture
async def bob(db_session: AsyncSession):
    from tests.factories.user import UserFactory
    user = await UserFactory.create_async(db_session, user_name="bob", name="Bob")
    await db_session.commit()
    return user


@pytest.fixture
async def team(db_session: AsyncSession):
    from tests.factories.team import TeamFactory
    team = await TeamFactory.create_async(db_session, name="Core Team")
    await db_session.commit()
    return team


@pytest.fixture
async def project(db_session: AsyncSession, team):
    from tests.factories.project import ProjectFactory
    project = await ProjectFactory.create_async(db_session, team_id=team.id, name="Backend")
    await db_session.commit()
    return project


@pytest.fixture
async def task(db_session: AsyncSession, project, alice, bob):
    """Task in `project`, created by alice, assigned to bob."""
    from tests.factories.task import TaskFactory
    task = await TaskFactory.create_async(
        db_session,
        project_id=project.id,
        creator_id=alice.id,
        responsible_id=bob.id,
        name="Write migrations"
    )
    await db_session.commit()
    return task
