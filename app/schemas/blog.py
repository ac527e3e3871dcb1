"""
Blog schemas.

Request-side models carry the submitted form fields into the service and
repository; response-side models define the JSON shape of a blog record.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BlogForm(BaseModel):
    """
    Fields submitted with a create or update request.

    Strings are trimmed and empty strings become ``None``. Only fields that
    were present in the request end up in ``model_fields_set``.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str | None = Field(default=None, description="Blog title")
    author: str | None = Field(default=None, description="Author name")
    description: str | None = Field(default=None, description="Blog body (rich text / HTML)")
    short_desc: str | None = Field(
        default=None,
        alias="shortDesc",
        description="Short plain-text description",
    )

    @field_validator("*", mode="after")
    @classmethod
    def empty_to_none(cls, v: str | None) -> str | None:
        """Store empty strings as null."""
        return v or None


class BlogCreate(BaseModel):
    """Validated values for a new blog record."""

    title: str
    author: str
    description: str | None = None
    short_desc: str | None = None
    image: str | None = None


class BlogUpdate(BaseModel):
    """Changes for an existing blog record; only set fields are applied."""

    title: str | None = None
    author: str | None = None
    description: str | None = None
    short_desc: str | None = None
    image: str | None = None


class BlogResponse(BaseModel):
    """Blog record as returned by the API."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    title: str
    author: str
    description: str | None = None
    short_desc: str | None = Field(default=None, alias="shortDesc")
    image: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    date: str | None = Field(
        default=None,
        description="Display date, only present on single-record reads",
        examples=["05 Jan, 2025"],
    )
