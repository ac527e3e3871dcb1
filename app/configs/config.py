"""Explicit configuration structs handed to the blog collaborators."""

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field

from app.configs.settings import Settings, settings


@dataclass(frozen=True)
class ImageStoreConfig:
    """Where blog images live and how they are served."""

    directory: Path
    url_prefix: str = "/uploads/blogs"
    dir_mode: int = 0o777


@dataclass(frozen=True)
class BlogRules:
    """Write-time rules for blog records."""

    title_min_length: int = 10
    author_min_length: int = 3
    image_max_size_kb: int = 2048
    image_allowed_extensions: tuple[str, ...] = ("jpeg", "png", "jpg", "gif")
    date_format: str = "%d %b, %Y"

    @property
    def image_max_size_bytes(self) -> int:
        return self.image_max_size_kb * 1024

    @property
    def image_accept(self) -> str:
        """Value for an HTML ``accept`` attribute."""
        return ",".join(f"image/{ext}" for ext in self.image_allowed_extensions)


@dataclass(frozen=True)
class BlogConfig:
    """Configuration bundle for the blog service and its image store."""

    store: ImageStoreConfig
    rules: BlogRules = field(default_factory=BlogRules)

    @classmethod
    def from_settings(cls, settings: Settings) -> "BlogConfig":
        """
        Build the configuration from application settings.

        Args:
            settings: Loaded application settings

        Returns:
            BlogConfig: Immutable configuration bundle
        """
        return cls(
            store=ImageStoreConfig(
                directory=settings.blog_uploads_dir,
                url_prefix="/" + settings.BLOG_UPLOADS_PATH.strip("/"),
            ),
            rules=BlogRules(
                title_min_length=settings.BLOG_TITLE_MIN_LENGTH,
                author_min_length=settings.BLOG_AUTHOR_MIN_LENGTH,
                image_max_size_kb=settings.BLOG_IMAGE_MAX_SIZE_KB,
                image_allowed_extensions=tuple(
                    ext.lower() for ext in settings.BLOG_IMAGE_ALLOWED_EXTENSIONS
                ),
                date_format=settings.BLOG_DATE_FORMAT,
            ),
        )


class LimiterConfig(BaseModel):
    """Keyword arguments for the ``slowapi`` limiter."""

    default_limits: list[str] = Field(default_factory=lambda: [settings.RATE_LIMIT_DEFAULT])
    enabled: bool = Field(default_factory=lambda: settings.RATE_LIMIT_ENABLED)
    headers_enabled: bool = False
    storage_uri: str = "memory://"
