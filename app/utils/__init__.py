"""Utility helper functions."""

from app.utils.helpers import format_display_date, get_summary, slugify, today_str

__all__ = [
    "format_display_date",
    "get_summary",
    "slugify",
    "today_str",
]
