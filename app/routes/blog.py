# app/routes/blog.py

"""
Blog Routes.

JSON endpoints for listing, reading, creating, updating and deleting blogs.
Every endpoint answers with the ``{status, message?, errors?, data?}``
envelope produced by ``BlogService``.

Summary
-------
Endpoints include:
  - List blogs (optional title keyword)
  - Create blog (multipart form with image)
  - Get blog by id
  - Update blog (multipart form, image optional)
  - Delete blog

Rate Limiting
-------------
Reads share the default limit; writes use the stricter write limit. Limits
are keyed on the client address and can be switched off in configuration.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, File, Query, Request, UploadFile
from fastapi.responses import ORJSONResponse

from app.configs import settings
from app.dependencies import BlogFormDep, BlogServiceDep
from app.managers import limiter
from app.services import ServiceResult

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])

RATE_LIMITED: dict[int | str, dict[str, Any]] = {
    429: {
        "description": "Rate limit exceeded",
        "content": {
            "application/json": {
                "example": {"status": False, "message": "Rate limit exceeded: 20 per 1 minute"},
            },
        },
    },
}

NOT_FOUND: dict[int | str, dict[str, Any]] = {
    404: {
        "description": "Not found",
        "content": {"application/json": {"example": {"status": False, "message": "Blog not found"}}},
    },
}

BLOG_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "title": "A Weekend in the Mountains",
    "author": "Jane Doe",
    "description": "<p>We left early on Saturday...</p>",
    "shortDesc": "Two days, three peaks.",
    "image": "1735862400-a-weekend-in-the-mountains-9f1c2e3a.jpg",
    "imageUrl": "/uploads/blogs/1735862400-a-weekend-in-the-mountains-9f1c2e3a.jpg",
    "createdAt": "2025-01-03T00:00:00Z",
    "updatedAt": "2025-01-03T00:00:00Z",
}

ImageFile = Annotated[UploadFile | None, File(description="JPEG, PNG or GIF up to 2048 KB")]


def envelope_response(result: ServiceResult) -> ORJSONResponse:
    """Render a service result as an HTTP response."""
    return ORJSONResponse(content=result.envelope.content(), status_code=result.status_code)


@router.get(
    "",
    response_class=ORJSONResponse,
    summary="List blogs",
    description="List all blogs, newest first. `keyword` keeps titles containing it.",
    responses={
        200: {"content": {"application/json": {"example": {"status": True, "data": [BLOG_EXAMPLE]}}}},
        **RATE_LIMITED,
    },
    operation_id="blogs_list",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def list_blogs(
    request: Request,
    service: BlogServiceDep,
    keyword: Annotated[str | None, Query(description="Title substring to search for")] = None,
) -> ORJSONResponse:
    """
    List blogs.

    Parameters
    ----------
    request : Request
        Current request context.
    service : BlogService
        Blog service dependency.
    keyword : str | None
        Optional title filter.

    Returns
    -------
    ORJSONResponse
        ``{"status": true, "data": [...]}``
    """
    return envelope_response(await service.list_blogs(keyword))


@router.post(
    "",
    response_class=ORJSONResponse,
    status_code=201,
    summary="Create a blog",
    description="Create a blog from a multipart form. `title`, `author` and `image` are required.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {"status": True, "message": "Blog added successfully.", "data": BLOG_EXAMPLE},
                },
            },
        },
        422: {
            "description": "Validation failed",
            "content": {
                "application/json": {
                    "example": {
                        "status": False,
                        "message": "Validation failed",
                        "errors": {"title": ["The title field must be at least 10 characters."]},
                    },
                },
            },
        },
        **RATE_LIMITED,
    },
    operation_id="blogs_create",
)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def create_blog(
    request: Request,
    service: BlogServiceDep,
    form: BlogFormDep,
    image: ImageFile = None,
) -> ORJSONResponse:
    """
    Create a blog with its image.

    Parameters
    ----------
    request : Request
        Current request context.
    service : BlogService
        Blog service dependency.
    form : BlogForm
        Submitted text fields.
    image : UploadFile | None
        Submitted image.

    Returns
    -------
    ORJSONResponse
        201 with the new blog, 422 with field errors, or 500.
    """
    return envelope_response(await service.create_blog(form, image))


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    summary="Get blog by ID",
    description="Retrieve one blog, including its display `date`.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"status": True, "data": {**BLOG_EXAMPLE, "date": "03 Jan, 2025"}},
                },
            },
        },
        **NOT_FOUND,
        **RATE_LIMITED,
    },
    operation_id="blogs_get",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def get_blog(request: Request, blog_id: UUID, service: BlogServiceDep) -> ORJSONResponse:
    """Get one blog by its id."""
    return envelope_response(await service.get_blog(blog_id))


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    summary="Update a blog",
    description=(
        "Update a blog from a multipart form. `description` and `shortDesc` change only "
        "when sent; the stored image is kept unless a new one is uploaded."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"status": True, "message": "Blog updated successfully.", "data": BLOG_EXAMPLE},
                },
            },
        },
        422: {
            "description": "Validation failed",
            "content": {
                "application/json": {
                    "example": {
                        "status": False,
                        "message": "Please fix the errors",
                        "errors": {"author": ["The author field is required."]},
                    },
                },
            },
        },
        **NOT_FOUND,
        **RATE_LIMITED,
    },
    operation_id="blogs_update",
)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def update_blog(
    request: Request,
    blog_id: UUID,
    service: BlogServiceDep,
    form: BlogFormDep,
    image: ImageFile = None,
) -> ORJSONResponse:
    """
    Update a blog.

    Parameters
    ----------
    request : Request
        Current request context.
    blog_id : UUID
        Blog to update.
    service : BlogService
        Blog service dependency.
    form : BlogForm
        Submitted text fields.
    image : UploadFile | None
        Optional replacement image.

    Returns
    -------
    ORJSONResponse
        200 with the updated blog, 404, 422 or 500.
    """
    return envelope_response(await service.update_blog(blog_id, form, image))


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    summary="Delete a blog",
    description="Delete a blog and its image file.",
    responses={
        200: {
            "content": {
                "application/json": {"example": {"status": True, "message": "Blog deleted successfully."}},
            },
        },
        **NOT_FOUND,
        **RATE_LIMITED,
    },
    operation_id="blogs_delete",
)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def delete_blog(request: Request, blog_id: UUID, service: BlogServiceDep) -> ORJSONResponse:
    """Delete a blog by its id."""
    return envelope_response(await service.delete_blog(blog_id))
