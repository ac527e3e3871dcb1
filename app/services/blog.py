"""
Blog service.

Coordinates validation, the image store and the blog repository for the
five blog operations. Every operation returns a ``ServiceResult`` carrying
the HTTP status and the response envelope; failures are reported in the
result instead of being raised.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import wraps
from logging import getLogger
from typing import Any, cast
from uuid import UUID

from fastapi import UploadFile, status

from app.configs import BlogConfig, file_logger
from app.errors import (
    BaseAppError,
    NotFoundError,
    PersistenceError,
    StorageWriteError,
    ValidationError,
)
from app.models.blog import BlogDB
from app.repositories.blog import BlogRepository
from app.schemas.blog import BlogCreate, BlogForm, BlogResponse, BlogUpdate
from app.schemas.response import ApiResponse
from app.services.storage import ImageStore
from app.services.validation import BlogFormValidator, ImagePayload, read_upload
from app.utils.helpers import format_display_date

logger = file_logger(getLogger(__name__))


@dataclass(frozen=True)
class ServiceResult:
    """Outcome of a blog operation."""

    status_code: int
    envelope: ApiResponse[Any]

    @property
    def ok(self) -> bool:
        return self.envelope.status

    @classmethod
    def from_error(cls, error: BaseAppError) -> "ServiceResult":
        """Envelope for an application error, with field errors when it has any."""
        fields: dict[str, Any] = {"status": False, "message": error.detail}
        if isinstance(error, ValidationError):
            fields["errors"] = error.errors
        return cls(error.status_code, ApiResponse(**fields))


def _failure(action: str, reason: str) -> ServiceResult:
    return ServiceResult(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ApiResponse(status=False, message=f"Failed to {action} blog: {reason}"),
    )


def reports_errors[**P](
    action: str,
) -> Callable[[Callable[P, Awaitable[ServiceResult]]], Callable[P, Awaitable[ServiceResult]]]:
    """
    Turn anything raised by the wrapped operation into a result.

    ``NotFoundError`` and ``ValidationError`` keep their own status and
    envelope. Any other failure becomes a 500 ``Failed to <action> blog``.

    Args:
        action: Verb used in the failure message
    """

    def decorator(
        func: Callable[P, Awaitable[ServiceResult]],
    ) -> Callable[P, Awaitable[ServiceResult]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> ServiceResult:
            try:
                return await func(*args, **kwargs)
            except (NotFoundError, ValidationError) as e:
                return ServiceResult.from_error(e)
            except BaseAppError as e:
                logger.error(f"Failed to {action} blog: {e.detail}")
                return _failure(action, e.detail)
            except Exception as e:
                logger.exception(f"Unexpected error while trying to {action} blog")
                return _failure(action, str(e) or type(e).__name__)

        return wrapper

    return decorator


class BlogService:
    """
    Service for blog listing, lookup, creation, update and deletion.

    Images are written before the record is persisted. When persisting
    fails the new image is removed again, so no record ever points at a
    file that was not written.
    """

    def __init__(self, repo: BlogRepository, store: ImageStore, config: BlogConfig) -> None:
        """
        Initialize the blog service.

        Args:
            repo: Blog repository bound to the request's session
            store: Image store for blog images
            config: Validation rules and store settings
        """
        self.repo = repo
        self.store = store
        self.config = config
        self.validator = BlogFormValidator(config.rules)

    def to_response(self, blog: BlogDB, *, with_date: bool = False) -> BlogResponse:
        """Build the API representation of a blog record."""
        data = blog.model_dump()
        data["image_url"] = self.store.url_for(blog.image)
        if with_date:
            data["date"] = format_display_date(blog.created_at, self.config.rules.date_format)
        return BlogResponse.model_validate(data)

    async def _require_blog(self, blog_id: UUID) -> BlogDB:
        blog = await self.repo.get_by_id(blog_id)
        if blog is None:
            raise NotFoundError
        return blog

    def _validate(
        self,
        form: BlogForm,
        image: ImagePayload | None,
        *,
        image_required: bool,
        message: str,
    ) -> None:
        errors = self.validator.validate_fields(form)
        if image_errors := self.validator.validate_image(image, required=image_required):
            errors["image"] = image_errors
        if errors:
            logger.info(f"Blog form rejected: {sorted(errors)}")
            raise ValidationError(detail=message, errors=errors)

    async def _save_image(self, image: ImagePayload, slug_hint: str) -> str:
        extension = self.validator.storage_extension(image)
        return await self.store.save(image.data, extension, slug_hint)

    async def _discard_image(self, filename: str | None) -> None:
        try:
            await self.store.delete(filename)
        except StorageWriteError as e:
            logger.error(f"Failed to remove image {filename}: {e.detail}")

    async def list_blogs(self, keyword: str | None = None) -> ServiceResult:
        """
        List blogs, newest first, optionally filtered by title keyword.

        Args:
            keyword: Substring the title must contain

        Returns:
            ServiceResult: Always 200 with the list in ``data``
        """
        blogs = await self.repo.get_all(keyword)
        return ServiceResult(
            status.HTTP_200_OK,
            ApiResponse(status=True, data=[self.to_response(blog) for blog in blogs]),
        )

    @reports_errors("get")
    async def get_blog(self, blog_id: UUID) -> ServiceResult:
        """
        Get one blog with its display date.

        Args:
            blog_id: Blog UUID

        Returns:
            ServiceResult: 200 with the blog, or 404
        """
        blog = await self._require_blog(blog_id)
        return ServiceResult(
            status.HTTP_200_OK,
            ApiResponse(status=True, data=self.to_response(blog, with_date=True)),
        )

    @reports_errors("create")
    async def create_blog(self, form: BlogForm, upload: UploadFile | None) -> ServiceResult:
        """
        Validate and create a blog with its image.

        Args:
            form: Submitted fields
            upload: Submitted image file

        Returns:
            ServiceResult: 201 with the new blog, 422 with field errors, or 500
        """
        image = await read_upload(upload, self.config.rules.image_max_size_bytes)
        if image:
            logger.info(
                f"Create blog request: image={image.filename} "
                f"type={image.content_type} size={image.size_kb:.1f}KB",
            )

        self._validate(form, image, image_required=True, message="Validation failed")
        image = cast(ImagePayload, image)
        title = cast(str, form.title)

        try:
            filename = await self._save_image(image, title)
        except StorageWriteError as e:
            logger.error(f"Failed to store blog image: {e.detail}")
            return _failure("create", e.detail)

        values = BlogCreate(
            title=title,
            author=cast(str, form.author),
            description=form.description,
            short_desc=form.short_desc,
            image=filename,
        )
        try:
            blog = await self.repo.create(values)
            await self.repo.commit()
        except PersistenceError as e:
            logger.error(f"Failed to persist blog, discarding image {filename}: {e.detail}")
            await self._discard_image(filename)
            return _failure("create", e.detail)

        logger.info(f"Blog {blog.id} created")
        return ServiceResult(
            status.HTTP_201_CREATED,
            ApiResponse(status=True, message="Blog added successfully.", data=self.to_response(blog)),
        )

    @reports_errors("update")
    async def update_blog(
        self,
        blog_id: UUID,
        form: BlogForm,
        upload: UploadFile | None,
    ) -> ServiceResult:
        """
        Validate and apply changes to an existing blog.

        ``description`` and ``shortDesc`` change only when they were sent.
        A new image replaces the stored one; the old file is removed after
        the record is committed.

        Args:
            blog_id: Blog UUID
            form: Submitted fields
            upload: Optional replacement image

        Returns:
            ServiceResult: 200 with the updated blog, 404, 422 or 500
        """
        blog = await self._require_blog(blog_id)
        image = await read_upload(upload, self.config.rules.image_max_size_bytes)
        self._validate(form, image, image_required=False, message="Please fix the errors")

        changes = BlogUpdate(title=form.title, author=form.author)
        for field in ("description", "short_desc"):
            if field in form.model_fields_set:
                setattr(changes, field, getattr(form, field))

        old_image = blog.image
        new_image: str | None = None
        if image:
            try:
                new_image = await self._save_image(image, form.title or blog.title)
            except StorageWriteError as e:
                logger.error(f"Failed to store replacement image for blog {blog_id}: {e.detail}")
                return _failure("update", e.detail)
            changes.image = new_image

        try:
            updated = await self.repo.update(blog_id, changes)
            await self.repo.commit()
        except PersistenceError as e:
            logger.error(f"Failed to update blog {blog_id}: {e.detail}")
            await self._discard_image(new_image)
            return _failure("update", e.detail)

        if updated is None:
            await self._discard_image(new_image)
            raise NotFoundError

        if new_image and old_image and old_image != new_image:
            await self._discard_image(old_image)

        logger.info(f"Blog {blog_id} updated")
        return ServiceResult(
            status.HTTP_200_OK,
            ApiResponse(
                status=True,
                message="Blog updated successfully.",
                data=self.to_response(updated),
            ),
        )

    @reports_errors("delete")
    async def delete_blog(self, blog_id: UUID) -> ServiceResult:
        """
        Delete a blog and then its image file.

        A failure to remove the file is logged; the record stays deleted.

        Args:
            blog_id: Blog UUID

        Returns:
            ServiceResult: 200, 404 or 500
        """
        blog = await self._require_blog(blog_id)

        image = blog.image
        try:
            await self.repo.delete(blog_id)
            await self.repo.commit()
        except PersistenceError as e:
            logger.error(f"Failed to delete blog {blog_id}: {e.detail}")
            return _failure("delete", e.detail)

        if image:
            await self._discard_image(image)

        logger.info(f"Blog {blog_id} deleted")
        return ServiceResult(
            status.HTTP_200_OK,
            ApiResponse(status=True, message="Blog deleted successfully."),
        )
