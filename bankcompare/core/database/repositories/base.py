"""
Base repository interfaces and utilities.

This module provides the foundational repository patterns used across all
repository implementations in the centralized database layer. Built with
async SQLAlchemy and SQLModel's ``AsyncSession``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from bankcompare.core.logging_config import get_logger

from ..base import utc_now
from ..errors import translate_integrity_error

logger = get_logger(__name__)

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncQueryBuilder:
    """Utility class for building async SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a SQLModel select statement.

        Unknown keys and ``None`` values are ignored.

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


class AsyncBaseRepository(Generic[EntityType]):
    """Base async repository with the common CRUD operations.

    Every write commits immediately. Integrity errors raised by the database
    are rolled back and re-raised as ``ConstraintViolationError`` subclasses.
    """

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLModel Session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    @property
    def table_name(self) -> str:
        return getattr(self.model, "__tablename__", self.model.__name__)

    def _default_order(self):
        """Column the ``list`` operation orders by; ``None`` keeps database order."""
        return getattr(self.model, "created_at", None)

    @asynccontextmanager
    async def _write(self) -> AsyncIterator[None]:
        """Run the enclosed writes in a savepoint, then commit.

        A constraint violation rolls back only the savepoint, so entities
        loaded earlier in the session keep their state. Changes that were
        already pending when the savepoint opened are flushed outside it; if
        that flush fails the whole session is rolled back.
        """
        try:
            async with self.session.begin_nested():
                yield
        except IntegrityError as exc:
            if not self.session.is_active:
                await self.session.rollback()
            error = translate_integrity_error(exc, table=self.table_name)
            logger.warning(f"{type(error).__name__} on {self.table_name}: {error.message}")
            raise error from exc
        await self.session.commit()

    async def create(self, entity: EntityType) -> EntityType:
        """Create a new entity record.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """
        async with self._write():
            self.session.add(entity)
        await self.session.refresh(entity)
        logger.debug(f"Created {self.table_name} row id={getattr(entity, 'id', None)}")
        return entity

    async def create_from(self, payload: BaseModel) -> EntityType:
        """Create a record from an insert schema.

        Fields the payload leaves unset fall back to the entity defaults.

        Args:
            payload: ``XCreate`` schema instance

        Returns:
            Persisted entity
        """
        entity = self.model(**payload.model_dump(exclude_unset=True))
        return await self.create(entity)

    async def get_by_id(self, entity_id: str) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """
        stmt = select(self.model).where(self.model.id == str(entity_id))
        return await self._one_or_none(stmt)

    async def update(self, entity: EntityType) -> EntityType:
        """Update an existing entity record.

        ``updated_at`` is refreshed here; the schema does not do it.

        Args:
            entity: SQLModel instance with updated fields

        Returns:
            Updated entity instance
        """
        async with self._write():
            if hasattr(entity, "updated_at"):
                entity.updated_at = utc_now()
            self.session.add(entity)
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: str) -> bool:
        """Delete entity by its primary identifier.

        Dependent rows follow the foreign key delete actions.

        Args:
            entity_id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        async with self._write():
            await self.session.delete(entity)
        logger.debug(f"Deleted {self.table_name} row id={entity_id}")
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters

        Returns:
            List of entity instances
        """
        stmt = select(self.model)
        order = self._default_order()
        if order is not None:
            stmt = stmt.order_by(order)

        if filters:
            stmt = AsyncQueryBuilder.apply_filters(stmt, self.model, filters)

        stmt = AsyncQueryBuilder.apply_pagination(stmt, limit, offset)

        return await self._all(stmt)

    # Reads overwrite identity-map copies so rows changed by database-side
    # delete actions are not served stale
    async def _all(self, stmt) -> List[EntityType]:
        result = await self.session.exec(stmt.execution_options(populate_existing=True))
        return list(result)

    async def _one_or_none(self, stmt) -> Optional[EntityType]:
        result = await self.session.exec(stmt.execution_options(populate_existing=True))
        return result.one_or_none()
