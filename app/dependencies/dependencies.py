# app/dependencies/dependencies.py

"""Application dependencies for the blog endpoints."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Form, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.configs import BlogConfig, settings
from app.db import get_session
from app.repositories import BlogRepository
from app.schemas.blog import BlogForm
from app.services import BlogService, ImageStore, get_image_store


@lru_cache
def get_blog_config() -> BlogConfig:
    """Blog rules and image store location, built once from settings."""
    return BlogConfig.from_settings(settings)


BlogConfigDep = Annotated[BlogConfig, Depends(get_blog_config)]


def get_blog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BlogRepository:
    return BlogRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_blog_image_store(config: BlogConfigDep) -> ImageStore:
    return get_image_store(config.store)


ImageStoreDep = Annotated[ImageStore, Depends(get_blog_image_store)]


def get_blog_service(
    repo: BlogRepoDep,
    store: ImageStoreDep,
    config: BlogConfigDep,
) -> BlogService:
    return BlogService(repo, store, config)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]


async def get_blog_form(
    request: Request,
    title: Annotated[str | None, Form(description="Blog title")] = None,
    author: Annotated[str | None, Form(description="Author name")] = None,
    description: Annotated[str | None, Form(description="Blog body (rich text / HTML)")] = None,
    short_desc: Annotated[
        str | None,
        Form(alias="shortDesc", description="Short plain-text description"),
    ] = None,
) -> BlogForm:
    """
    Collect the submitted blog fields.

    Only fields present in the request body are set on the returned form,
    so an update can tell "sent empty" apart from "not sent".
    """
    submitted = await request.form()
    fields = {
        "title": title,
        "author": author,
        "description": description,
        "shortDesc": short_desc,
    }
    return BlogForm.model_validate({k: v for k, v in fields.items() if k in submitted})


BlogFormDep = Annotated[BlogForm, Depends(get_blog_form)]
