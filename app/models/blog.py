"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Length rules on ``title`` and ``author`` are enforced when writing
    through the blog service, not by the table. ``image`` holds the name
    of a file in the image store.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Blog title",
    )
    author: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Author display name",
    )

    # Optional fields
    description: str | None = Field(
        default=None,
        sa_column=Column(Text),
        description="Blog body (rich text / HTML)",
    )
    short_desc: str | None = Field(
        default=None,
        sa_column=Column(Text),
        description="Short plain-text description",
    )
    image: str | None = Field(
        default=None,
        sa_column=Column(String(255)),
        description="Stored image filename",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "My First Blog Post",
                "author": "Jane",
                "description": "<p>Hello world</p>",
                "short_desc": "A first post",
                "image": "1735689600-my-first-blog-post-1a2b3c4d.jpg",
            },
        },
    )
