"""
Data factories for test data generation.

Factories use factory-boy to create realistic test data with sensible defaults.
All factories support async creation via create_async() method.

Usage:
    from tests.factories import UserFactory, TeamFactory

    user = await UserFactory.create_async(db_session, user_name="alice")
    team = await TeamFactory.create_async(db_session, name="Core Team")
"""

from tests.factories.user import UserFactory
from tests.factories.team import TeamFactory
from tests.factories.project import ProjectFactory
from tests.factories.task import TaskFactory
from tests.factories.comment import CommentFactory

__all__ = [
    "UserFactory",
    "TeamFactory",
    "ProjectFactory",
    "TaskFactory",
    "CommentFactory",
]
