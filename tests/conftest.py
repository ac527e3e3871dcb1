# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os
import tempfile
from pathlib import Path

# Settings are read at import time; point them at a scratch area before the
# app is imported anywhere.
_TEST_ROOT = Path(tempfile.mkdtemp(prefix="blog-publisher-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_ROOT / 'app.db'}"
os.environ["PUBLIC_DIR"] = str(_TEST_ROOT / "public")
os.environ["LOG_TO_FILE"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "testing"

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from io import BytesIO  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from PIL import Image  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine  # noqa: E402

from app.configs import BlogConfig, BlogRules, ImageStoreConfig, pool_kwargs  # noqa: E402
from app.db import create_session_maker, get_session, init_db  # noqa: E402
from app.dependencies import get_blog_config  # noqa: E402
from app.main import app  # noqa: E402
from app.repositories import BlogRepository  # noqa: E402
from app.services import BlogService, LocalImageStore  # noqa: E402


def make_image(image_format: str = "JPEG", size: tuple[int, int] = (64, 64)) -> bytes:
    """Encode a small solid-colour image."""
    mode = "P" if image_format == "GIF" else "RGB"
    img = Image.new(mode, size)
    buffer = BytesIO()
    img.save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def image_factory() -> Callable[..., bytes]:
    """Return the image encoder so tests can build their own images."""
    return make_image


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image("JPEG")


@pytest.fixture
def png_bytes() -> bytes:
    return make_image("PNG")


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Per-test SQLite database with the schema created."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    test_engine = create_async_engine(url, **pool_kwargs(url))
    await init_db(bind=test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    async with create_session_maker(engine)() as db_session:
        yield db_session


@pytest.fixture
def blog_config(tmp_path: Path) -> BlogConfig:
    return BlogConfig(
        store=ImageStoreConfig(directory=tmp_path / "public" / "uploads" / "blogs"),
        rules=BlogRules(),
    )


@pytest.fixture
def image_store(blog_config: BlogConfig) -> LocalImageStore:
    return LocalImageStore(blog_config.store)


@pytest.fixture
def repo(session: AsyncSession) -> BlogRepository:
    return BlogRepository(session)


@pytest.fixture
def service(
    repo: BlogRepository,
    image_store: LocalImageStore,
    blog_config: BlogConfig,
) -> BlogService:
    return BlogService(repo, image_store, blog_config)


@pytest.fixture
async def client(engine: AsyncEngine, blog_config: BlogConfig) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the per-test database and upload directory."""
    session_maker = create_session_maker(engine)

    async def override_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as db_session:
            try:
                yield db_session
                await db_session.commit()
            except Exception:
                await db_session.rollback()
                raise

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_blog_config] = lambda: blog_config
    async with AsyncClient(base_url="http://test", transport=ASGITransport(app=app)) as ac:
        yield ac
    app.dependency_overrides.clear()
