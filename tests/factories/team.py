"""
Team factory for test data generation.
"""

import factory
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.models.team import Team


class TeamFactory(factory.Factory):
    """
    Factory for Team model. Use `create_with_members_async` for a team with members.
    """

    class Meta:
        model = Team

    name = factory.Sequence(lambda n: f"Team {n}")

    @classmethod
    async def create_async(
        cls,
        db_session: AsyncSession,
        **kwargs
    ) -> Team:
        """
        Create team in database asynchronously.

        Usage:
            team = await TeamFactory.create_async(db_session, name="My Team")
        """
        instance = cls.build(**kwargs)
        db_session.add(instance)
        await db_session.flush()
        return instance

    @classmethod
    async def create_with_members_async(
        cls,
        db_session: AsyncSession,
        members,
        **kwargs
    ) -> Team:
        """
        Create team whose member set is `members` (User instances).
        """
        instance = cls.build(users=list(members), **kwargs)
        db_session.add(instance)
        await db_session.flush()
        return instance
