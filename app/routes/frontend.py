# app/routes/frontend.py

"""
Frontend Routes.

Server-rendered pages for browsing, reading, creating and editing blogs.
Pages read through ``BlogService``; the create and edit forms submit to the
JSON endpoints with ``static/js/blog-form.js``.
"""

from pathlib import Path
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.configs import settings
from app.dependencies import BlogConfigDep, BlogServiceDep
from app.services import ServiceResult

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.globals["app_name"] = settings.APP_NAME

router = APIRouter(tags=["🖥️ Frontend"], include_in_schema=False)


def _error_page(request: Request, result: ServiceResult) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "blogs/error.html",
        {"message": result.envelope.message},
        status_code=result.status_code,
    )


@router.get("/", response_class=HTMLResponse, name="blog_index")
async def blog_index(
    request: Request,
    service: BlogServiceDep,
    keyword: Annotated[str | None, Query()] = None,
) -> HTMLResponse:
    """Blog list with title search."""
    result = await service.list_blogs(keyword)
    return templates.TemplateResponse(
        request,
        "blogs/index.html",
        {"blogs": result.envelope.data or [], "keyword": keyword or ""},
    )


@router.get("/create", response_class=HTMLResponse, name="blog_create")
async def blog_create(request: Request, config: BlogConfigDep) -> HTMLResponse:
    """Empty create form."""
    return templates.TemplateResponse(
        request,
        "blogs/form.html",
        {"blog": None, "rules": config.rules, "method": "POST", "action": "/blogs"},
    )


@router.get("/blog/{blog_id}", response_class=HTMLResponse, name="blog_detail")
async def blog_detail(request: Request, blog_id: UUID, service: BlogServiceDep) -> HTMLResponse:
    """Single blog page."""
    result = await service.get_blog(blog_id)
    if not result.ok:
        return _error_page(request, result)
    return templates.TemplateResponse(request, "blogs/detail.html", {"blog": result.envelope.data})


@router.get("/blog/{blog_id}/edit", response_class=HTMLResponse, name="blog_edit")
async def blog_edit(
    request: Request,
    blog_id: UUID,
    service: BlogServiceDep,
    config: BlogConfigDep,
) -> HTMLResponse:
    """Edit form prefilled with the stored blog."""
    result = await service.get_blog(blog_id)
    if not result.ok:
        return _error_page(request, result)
    return templates.TemplateResponse(
        request,
        "blogs/form.html",
        {
            "blog": result.envelope.data,
            "rules": config.rules,
            "method": "PUT",
            "action": f"/blogs/{blog_id}",
        },
    )
