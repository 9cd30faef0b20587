"""
Base repository and query utilities.

This module provides the repository pattern shared by every entity of the
database layer. Built with async SQLAlchemy on top of SQLModel entities.

Two write styles are offered:

- ``create``/``update``/``delete`` commit immediately, for single-row CRUD.
- ``stage``/``remove`` only flush, so a service can group several writes and
  commit them together as one transaction.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete as sa_delete
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from ..base import utc_now

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a SQLModel select statement.

        ``None`` values and unknown fields are ignored.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt


class BaseRepository(Generic[EntityType]):
    """Base repository with common CRUD operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with database session and SQLModel entity class.

        Args:
            session: Async SQLAlchemy session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    def default_order(self) -> Sequence[Any]:
        """Ordering applied by ``list`` when none is given."""
        return (self.model.id,)

    async def create(self, entity: EntityType) -> EntityType:
        """Persist a new entity and commit.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """
        return await self.session.get(self.model, entity_id)

    async def update(self, entity: EntityType) -> EntityType:
        """Commit changes made to an existing entity.

        Args:
            entity: SQLModel instance with updated fields

        Returns:
            Updated entity instance
        """
        if hasattr(entity, "updated_at"):
            entity.updated_at = utc_now()
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: int) -> bool:
        """Delete entity by its primary identifier and commit.

        Args:
            entity_id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        await self.session.commit()
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[EntityType]:
        """List entities with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters

        Returns:
            List of entity instances
        """
        stmt = select(self.model).order_by(*self.default_order())
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count entities matching equality filters."""
        stmt = select(func.count()).select_from(self.model)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def stage(self, entity: EntityType) -> EntityType:
        """Add an entity to the current transaction without committing.

        The session is flushed so generated identifiers are available.
        """
        if getattr(entity, "id", None) is not None and hasattr(entity, "updated_at"):
            entity.updated_at = utc_now()
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def remove(self, entity: EntityType) -> None:
        """Delete an entity inside the current transaction without committing."""
        await self.session.delete(entity)
        await self.session.flush()

    async def delete_where(self, **criteria: Any) -> int:
        """Bulk delete rows matching equality criteria, without committing.

        Returns:
            Number of deleted rows
        """
        stmt = sa_delete(self.model)
        for key, value in criteria.items():
            column = getattr(self.model, key)
            if isinstance(value, (list, tuple, set)):
                stmt = stmt.where(column.in_(list(value)))
            else:
                stmt = stmt.where(column == value)
        result = await self.session.execute(stmt)
        return result.rowcount or 0


class TenantRepository(BaseRepository[EntityType]):
    """Repository for entities owned by a cooperative."""

    async def get_in_cooperative(self, cooperative_id: int, entity_id: int) -> Optional[EntityType]:
        """Get an entity only if it belongs to the given cooperative."""
        stmt = select(self.model).where(
            self.model.id == entity_id,
            self.model.cooperative_id == cooperative_id,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_for_cooperative(
        self,
        cooperative_id: int,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        **filters: Any,
    ) -> List[EntityType]:
        """List the entities of one cooperative, with optional equality filters."""
        return await self.list(limit=limit, offset=offset, filters={"cooperative_id": cooperative_id, **filters})
