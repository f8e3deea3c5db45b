"""
Storage accessor used by the services.

A Repository is bound to one model and one AsyncSession. It exposes the
small set of operations the services need and turns persistence failures
into a StorageError carrying a StorageErrorKind, so callers branch on the
kind rather than on driver messages.
"""

from enum import Enum
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.exc import StaleDataError

from taskboard.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class StorageErrorKind(str, Enum):
    CONSTRAINT_VIOLATION = "constraint_violation"
    STALE_VERSION = "stale_version"


class StorageError(Exception):
    """Write failure reported by the store."""

    def __init__(self, kind: StorageErrorKind, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail


class Repository(Generic[ModelT]):
    """
    Args:
        session: request-scoped AsyncSession
        model: mapped class this repository reads and writes
        merge_fields: attributes `merge()` is allowed to overwrite
    """

    def __init__(self, session: AsyncSession, model: Type[ModelT], merge_fields: Iterable[str]):
        self.session = session
        self.model = model
        self.merge_fields = frozenset(merge_fields)

    def _loaders(self, relations: Iterable[Enum]):
        return [selectinload(getattr(self.model, relation.value)) for relation in relations]

    async def find(
        self,
        *criteria,
        relations: Iterable[Enum] = (),
        limit: Optional[int] = None,
    ) -> List[ModelT]:
        query = select(self.model).options(*self._loaders(relations)).order_by(self.model.id)
        if criteria:
            query = query.where(*criteria)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_one(self, *criteria, relations: Iterable[Enum] = ()) -> Optional[ModelT]:
        query = select(self.model).where(*criteria).options(*self._loaders(relations))
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_one_by(self, **key: Any) -> Optional[ModelT]:
        result = await self.session.execute(select(self.model).filter_by(**key))
        return result.scalar_one_or_none()

    def create(self, **payload: Any) -> ModelT:
        """Build an entity in memory. Nothing is persisted until save()."""
        return self.model(**payload)

    def merge(self, entity: ModelT, partial: Dict[str, Any]) -> ModelT:
        """Overlay `partial` onto `entity`; omitted fields keep their value."""
        unknown = set(partial) - self.merge_fields
        if unknown:
            raise ValueError(f"{self.model.__name__} cannot merge fields: {', '.join(sorted(unknown))}")
        for field, value in partial.items():
            setattr(entity, field, value)
        return entity

    async def save(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        await self._commit()
        return entity

    async def delete(self, entity: ModelT) -> ModelT:
        await self.session.delete(entity)
        await self._commit()
        return entity

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise StorageError(StorageErrorKind.CONSTRAINT_VIOLATION, str(e.orig)) from e
        except StaleDataError as e:
            await self.session.rollback()
            raise StorageError(StorageErrorKind.STALE_VERSION, str(e)) from e
