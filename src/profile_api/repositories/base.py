"""Base repository with common database operations."""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.models.orm.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Base repository with common CRUD operations."""

    model: type[T]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def get(self, id: UUID, for_update: bool = False) -> T | None:
        """Get a record by ID.

        Args:
            id: Record UUID
            for_update: Lock the row until the transaction ends

        Returns:
            Record or None if not found
        """
        query = select(self.model).where(self.model.id == id)
        if for_update:
            # Reload under the lock; bulk updates bypass the identity map
            query = query.with_for_update().execution_options(populate_existing=True)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_ids(self, ids: list[UUID]) -> dict[UUID, T]:
        """Get multiple records by ID in a single query.

        Args:
            ids: Record UUIDs

        Returns:
            Dict mapping ID to record; missing IDs are absent
        """
        if not ids:
            return {}
        result = await self.session.execute(select(self.model).where(self.model.id.in_(ids)))
        return {row.id: row for row in result.scalars().all()}

    async def exists(self, id: UUID) -> bool:
        """Check whether a record exists."""
        result = await self.session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None

    async def create(self, **kwargs: Any) -> T:
        """Create a new record.

        Args:
            **kwargs: Field values

        Returns:
            Created record
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance
