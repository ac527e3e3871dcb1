"""Base repository for database operations."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from app.errors.database import PersistenceError


class BaseRepository[ModelT: SQLModel, CreateSchemaT: BaseModel, UpdateSchemaT: BaseModel]:
    """
    Base repository implementing common CRUD operations.

    This class provides a generic implementation of database operations
    that can be extended by specific entity repositories. No validation
    happens here; callers validate before writing. Any SQLAlchemy failure
    rolls the session back and surfaces as ``PersistenceError``.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, schema: CreateSchemaT, **kwargs: Any) -> ModelT:
        """
        Create a new record in the database.

        Args:
            schema: Creation schema with data
            **kwargs: Extra column values not carried by the schema

        Returns:
            ModelT: Created database model
        """
        data = schema.model_dump(exclude_unset=True)
        data.update(kwargs)
        db_obj = self.model(**data)
        return await self._add_and_refresh(db_obj)

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            raise PersistenceError(detail=f"Failed to load record: {e}") from e
        return result.scalar_one_or_none()

    async def update(
        self,
        record_id: UUID,
        schema: UpdateSchemaT,
        **kwargs: Any,
    ) -> ModelT | None:
        """
        Update a record.

        Args:
            record_id: Record UUID
            schema: Update schema; only explicitly set fields are applied
            **kwargs: Extra column values not carried by the schema

        Returns:
            ModelT | None: Updated record if found, None otherwise
        """
        db_obj = await self.get_by_id(record_id)
        if not db_obj:
            return None

        obj_data = schema.model_dump(exclude_unset=True)
        obj_data.update(kwargs)
        for key, value in obj_data.items():
            setattr(db_obj, key, value)

        return await self._add_and_refresh(db_obj)

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if record was deleted, False if not found
        """
        record = await self.get_by_id(record_id)
        if not record:
            return False

        try:
            await self.session.delete(record)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(detail=f"Failed to delete record: {e}") from e
        return True

    async def commit(self) -> None:
        """
        Make pending changes durable.

        Raises:
            PersistenceError: If the commit fails (the session is rolled back)
        """
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(detail=f"Failed to commit changes: {e}") from e

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            PersistenceError: For any database error
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except SQLAlchemyError as e:
            await self.session.rollback()
            error_msg = str(getattr(e, "orig", None) or e)
            raise PersistenceError(detail=f"Failed to save record: {error_msg}") from e
