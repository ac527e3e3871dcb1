from app.configs.config import BlogConfig, BlogRules, ImageStoreConfig, LimiterConfig
from app.configs.logger import file_logger
from app.configs.settings import (
    BLOG_NOT_FOUND,
    Settings,
    pool_kwargs,
    settings,
)

__all__ = [
    "BLOG_NOT_FOUND",
    "BlogConfig",
    "BlogRules",
    "ImageStoreConfig",
    "LimiterConfig",
    "Settings",
    "file_logger",
    "pool_kwargs",
    "settings",
]
