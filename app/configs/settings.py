"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the blog publisher backend.
"""

from pathlib import Path
from typing import Any

from pydantic_settings.main import BaseSettings, SettingsConfigDict
from sqlalchemy.pool import NullPool

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
BLOG_NOT_FOUND = "Blog not found"

# Connection pool defaults only apply to server databases (asyncpg)
STATEMENT_TIMEOUT_MS = 30000


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog Publisher"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/app.log"
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./blog.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30
    POOL_RECYCLE: int = 1800

    # Uploads
    PUBLIC_DIR: Path = Path("public")
    BLOG_UPLOADS_PATH: str = "uploads/blogs"
    BLOG_IMAGE_MAX_SIZE_KB: int = 2048
    BLOG_IMAGE_ALLOWED_EXTENSIONS: list[str] = ["jpeg", "png", "jpg", "gif"]

    # Blog rules
    BLOG_TITLE_MIN_LENGTH: int = 10
    BLOG_AUTHOR_MIN_LENGTH: int = 3
    BLOG_DATE_FORMAT: str = "%d %b, %Y"

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "120/minute"
    RATE_LIMIT_WRITE: str = "20/minute"

    @property
    def blog_uploads_dir(self) -> Path:
        """Absolute-or-relative directory holding blog images."""
        return self.PUBLIC_DIR / self.BLOG_UPLOADS_PATH


def pool_kwargs(database_url: str) -> dict[str, Any]:
    """
    Build engine keyword arguments for the configured database driver.

    SQLite connections are opened per checkout; sizing arguments are only
    passed for server databases.

    Args:
        database_url: SQLAlchemy database URL.

    Returns:
        dict[str, Any]: Keyword arguments for ``create_async_engine``.
    """
    if database_url.startswith("sqlite"):
        return {"poolclass": NullPool}
    kwargs: dict[str, Any] = {
        "pool_size": settings.POOL_SIZE,
        "max_overflow": settings.MAX_OVERFLOW,
        "pool_timeout": settings.POOL_TIMEOUT,
        "pool_recycle": settings.POOL_RECYCLE,
        "pool_pre_ping": True,
    }
    if database_url.startswith("postgresql+asyncpg"):
        kwargs["connect_args"] = {
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        }
    return kwargs


settings = Settings()
