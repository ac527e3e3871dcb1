# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    BlogConfigDep,
    BlogFormDep,
    BlogRepoDep,
    BlogServiceDep,
    ImageStoreDep,
    get_blog_config,
    get_blog_form,
    get_blog_image_store,
    get_blog_repository,
    get_blog_service,
)

__all__ = [
    "BlogConfigDep",
    "BlogFormDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "ImageStoreDep",
    "get_blog_config",
    "get_blog_form",
    "get_blog_image_store",
    "get_blog_repository",
    "get_blog_service",
]
