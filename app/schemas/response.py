"""Uniform response envelope shared by every blog endpoint."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """
    Envelope ``{status, message?, errors?, data?}``.

    Members that were never set are left out of the serialized payload.
    """

    status: bool
    message: str | None = None
    errors: dict[str, list[str]] | None = Field(
        default=None,
        description="Validation messages keyed by field name",
    )
    data: DataT | None = None

    def content(self) -> dict[str, Any]:
        """Return the JSON-ready payload."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
