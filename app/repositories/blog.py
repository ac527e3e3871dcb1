"""Blog repository for database operations."""

from logging import getLogger
from typing import Any
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError

from app.configs import file_logger
from app.errors.database import PersistenceError
from app.models.blog import BlogDB, utc_now
from app.repositories.base import BaseRepository
from app.schemas.blog import BlogCreate, BlogUpdate

logger = file_logger(getLogger(__name__))


class BlogRepository(BaseRepository[BlogDB, BlogCreate, BlogUpdate]):
    """
    Repository for Blog database operations.

    Provides listing with an optional title keyword, lookup by id,
    create, update and delete. Timestamps are maintained here.
    """

    model = BlogDB

    async def get_all(self, keyword: str | None = None) -> list[BlogDB]:
        """
        Get all blogs, newest first.

        Args:
            keyword: Optional substring the title must contain. The match
                follows the database's default ``LIKE`` case rules; ``%``
                and ``_`` in the keyword are matched literally.

        Returns:
            list[BlogDB]: Matching blogs ordered by ``created_at`` descending
        """
        # pyrefly: ignore [bad-argument-type]
        query = select(BlogDB).order_by(desc(BlogDB.created_at))

        if keyword and keyword.strip():
            # pyrefly: ignore [missing-attribute]
            query = query.where(BlogDB.title.contains(keyword.strip(), autoescape=True))

        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            raise PersistenceError(detail=f"Failed to list blogs: {e}") from e

        blogs = list(result.scalars().all())
        if keyword:
            logger.info(f"Found {len(blogs)} blogs matching keyword {keyword!r}")
        return blogs

    async def create(self, schema: BlogCreate, **kwargs: Any) -> BlogDB:
        """
        Create a new blog post in the database.

        Args:
            schema: Validated blog values

        Returns:
            BlogDB: Created blog database model
        """
        now = utc_now()
        return await super().create(schema, created_at=now, updated_at=now, **kwargs)

    async def update(
        self,
        record_id: UUID,
        schema: BlogUpdate,
        **kwargs: Any,
    ) -> BlogDB | None:
        """
        Update blog information.

        Args:
            record_id: Blog UUID
            schema: Fields to change; unset fields keep their stored value

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        return await super().update(record_id, schema, updated_at=utc_now(), **kwargs)
