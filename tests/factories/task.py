"""
Task factory for test data generation.
"""

import factory
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.models.task import Task, TaskStatus


class TaskFactory(factory.Factory):

    class Meta:
        model = Task

    name = factory.Sequence(lambda n: f"Task {n}")
    description = factory.Faker("sentence")
    status = TaskStatus.PENDING
    deleted = False
    project_id = None  # Must be set
    creator_id = None  # Must be set
    responsible_id = None

    @classmethod
    async def create_async(
        cls,
        db_session: AsyncSession,
        **kwargs
    ) -> Task:
        """
        Create task in database asynchronously.

        Args:
            db_session: AsyncSession instance
            **kwargs: Override factory attributes (project_id and creator_id required)

        Usage:
            task = await TaskFactory.create_async(
                db_session,
                project_id=project.id,
                creator_id=alice.id,
                responsible_id=bob.id
            )
        """
        for required in ("project_id", "creator_id"):
            if required not in kwargs:
                raise ValueError(f"{required} is required for TaskFactory")

        instance = cls.build(**kwargs)
        db_session.add(instance)
        await db_session.flush()
        return instance
