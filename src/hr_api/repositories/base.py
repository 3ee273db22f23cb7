"""Base repository with common database operations."""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.models.orm.base import Base

T = TypeVar("T", bound=Base)
D = TypeVar("D")


class BaseRepository(Generic[T, D]):
    """Base repository mapping ORM rows of ``model`` to domain aggregates.

    Subclasses implement ``_to_domain`` and ``_apply``.
    """

    model: type[T]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    def _to_domain(self, row: T) -> D:
        raise NotImplementedError

    def _apply(self, row: T, entity: D) -> None:
        raise NotImplementedError

    async def _get_row(self, id: UUID) -> T | None:
        return await self.session.get(self.model, id)

    async def _fetch(self, statement: Any) -> list[D]:
        result = await self.session.execute(statement)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def get_by_id(self, id: UUID) -> D | None:
        """Get an aggregate by ID.

        Args:
            id: Aggregate UUID

        Returns:
            Domain aggregate or None if not found
        """
        row = await self._get_row(id)
        return self._to_domain(row) if row is not None else None

    async def find_all(self) -> list[D]:
        """Get all aggregates, oldest first.

        Returns:
            List of domain aggregates
        """
        return await self._fetch(
            select(self.model).order_by(self.model.created_at, self.model.id)
        )

    async def count(self) -> int:
        """Count total records.

        Returns:
            Total count
        """
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()

    async def save(self, entity: D) -> None:
        """Insert or update an aggregate, matched by ID.

        Args:
            entity: Domain aggregate to persist
        """
        row = await self._get_row(entity.id)
        if row is None:
            row = self.model(id=entity.id)
            self.session.add(row)
        self._apply(row, entity)
        await self.session.flush()

    async def delete(self, entity: D) -> bool:
        """Delete an aggregate.

        Args:
            entity: Domain aggregate to remove

        Returns:
            True if deleted, False if not found
        """
        row = await self._get_row(entity.id)
        if row is None:
            return False

        await self.session.delete(row)
        await self.session.flush()
        return True
