"""
Base Repository

This module provides a generic base repository with common CRUD operations.
All entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by UUID
- exists(id)     → Check if record exists
- create()       → Create new record
- update()       → Update existing record
- delete()       → Hard delete record

Generic Type Pattern:
=====================
    class UserRepository(BaseRepository[User]):
        pass

    repo = UserRepository(db)
    user = await repo.get(id)  # Returns User, not Any!

Store Faults:
=============
Every statement runs inside store_errors(), so a dead database or an
exhausted pool reaches the service layer as StoreUnavailableError and
never as a raw driver exception.

flush() vs commit():
====================
- flush(): Sends SQL to database but doesn't commit transaction
- commit(): Called by get_db() after the request handler completes
  Repository methods only flush, so the whole request is one transaction.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable
from sqlalchemy.sql.functions import count as sql_count

from puppymatch.shared.db.errors import store_errors
from puppymatch.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # EXECUTION HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _execute(self, statement: Executable, params: Any = None) -> Any:
        """Execute a statement with store faults translated."""
        async with store_errors():
            if params is None:
                return await self.session.execute(statement)
            return await self.session.execute(statement, params)

    async def _flush(self) -> None:
        """Flush pending changes with store faults translated."""
        async with store_errors():
            await self.session.flush()

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its UUID.

        Args:
            record_id: The UUID of the record to fetch

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM users WHERE id = '550e8400-...'
        """
        result = await self._execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def exists(self, record_id: UUID) -> bool:
        """
        Check if a record exists without loading it.

        Args:
            record_id: The UUID to check

        Returns:
            True if record exists, False otherwise

        SQL Generated:
            SELECT COUNT(*) FROM users WHERE id = '...'
        """
        result = await self._execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Adds the instance, flushes to send the INSERT, then refreshes to pick
        up server defaults such as created_at.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values

        Raises:
            IntegrityError: If a constraint is violated (left to the caller)
        """
        instance = self.model(**kwargs)
        self.session.add(instance)

        await self._flush()

        async with store_errors():
            await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(
        self,
        record_id: UUID,
        **kwargs: Any,
    ) -> Optional[ModelType]:
        """
        Update a record by ID.

        Every keyword given is applied, including None, so callers can clear
        nullable columns.

        Args:
            record_id: UUID of the record to update
            **kwargs: Fields to update

        Returns:
            Updated model instance, or None if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        for field, value in kwargs.items():
            if hasattr(instance, field):
                setattr(instance, field, value)

        await self._flush()

        async with store_errors():
            await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: UUID) -> bool:
        """
        Hard delete a record by ID.

        ORM cascades (e.g. a user's interest rows) are applied on flush.

        Args:
            record_id: UUID of the record to delete

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        async with store_errors():
            await self.session.delete(instance)
        await self._flush()
        return True
