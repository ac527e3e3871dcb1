from collections.abc import MutableMapping
from datetime import datetime
from re import sub
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route

DEFAULT_SLUG = "blog"


def today_str() -> str:
    """Return the current local date and time as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary


def slugify(text: str, default: str = DEFAULT_SLUG) -> str:
    """
    Derive a URL and filesystem safe slug from ``text``.

    Args:
        text: Source text, usually a blog title
        default: Returned when nothing usable is left

    Returns:
        str: Lowercase alphanumeric words joined by single hyphens

    Examples:
        >>> slugify("My First Blog Post!")
        'my-first-blog-post'
    """
    slug = text.lower()
    slug = sub(r"[^a-z0-9\s-]", "", slug)
    slug = sub(r"[\s-]+", "-", slug).strip("-")
    return slug or default


def format_display_date(value: datetime, date_format: str) -> str:
    """Format a stored timestamp for display, e.g. ``05 Jan, 2025``."""
    return value.strftime(date_format)
