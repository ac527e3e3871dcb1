# tests/db/test_database.py
"""Tests for database setup helpers."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine

from app.db import get_session, ping_db, transaction
from app.db.init_db import main
from app.errors import DatabaseInitializationError


class TestInitDb:
    """Tests for schema creation."""

    @pytest.mark.asyncio
    async def test_creates_blogs_table(self, engine: AsyncEngine) -> None:
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert "blogs" in tables

    @pytest.mark.asyncio
    async def test_script_wraps_failures(self) -> None:
        with (
            patch("app.db.init_db.init_db", AsyncMock(side_effect=OSError("no disk"))),
            patch("app.db.init_db.close_db", AsyncMock()) as close,
            pytest.raises(DatabaseInitializationError),
        ):
            await main()
        close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_script_success(self) -> None:
        with (
            patch("app.db.init_db.init_db", AsyncMock()) as init,
            patch("app.db.init_db.close_db", AsyncMock()) as close,
        ):
            await main()
        init.assert_awaited_once()
        close.assert_awaited_once()


class TestPingDb:
    """Tests for the health probe helper."""

    @pytest.mark.asyncio
    async def test_ping_reachable(self) -> None:
        assert await ping_db() is True


def fake_session_maker() -> tuple[MagicMock, AsyncMock]:
    session = AsyncMock()
    maker = MagicMock()
    maker.return_value.__aenter__.return_value = session
    return maker, session


class TestSessions:
    """Tests for request sessions and transactions."""

    @pytest.mark.asyncio
    async def test_get_session_commits_on_success(self) -> None:
        maker, session = fake_session_maker()
        with patch("app.db.database.async_session_maker", maker):
            sessions = get_session()
            assert await anext(sessions) is session
            with pytest.raises(StopAsyncIteration):
                await anext(sessions)

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_transaction_rolls_back_on_error(self) -> None:
        maker, session = fake_session_maker()
        with (
            patch("app.db.database.async_session_maker", maker),
            pytest.raises(RuntimeError, match="boom"),
        ):
            async with transaction():
                raise RuntimeError("boom")

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
        session.close.assert_awaited_once()
