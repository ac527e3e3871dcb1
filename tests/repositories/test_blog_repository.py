# tests/repositories/test_blog_repository.py
"""Tests for BlogRepository."""

from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from app.errors import PersistenceError
from app.repositories import BlogRepository
from app.schemas.blog import BlogCreate, BlogUpdate


def blog_values(title: str = "Repository test blog", **overrides: str | None) -> BlogCreate:
    return BlogCreate.model_validate(
        {"title": title, "author": "Tester", "image": "1700000000-x-deadbeef.jpg", **overrides},
    )


class TestBlogRepository:
    """Tests for BlogRepository CRUD and search."""

    @pytest.mark.asyncio
    async def test_create_sets_id_and_timestamps(self, repo: BlogRepository) -> None:
        blog = await repo.create(blog_values())
        await repo.commit()

        assert blog.id is not None
        assert blog.created_at is not None
        assert blog.updated_at == blog.created_at

        fetched = await repo.get_by_id(blog.id)
        assert fetched is not None
        assert fetched.title == "Repository test blog"

    @pytest.mark.asyncio
    async def test_get_by_id_unknown(self, repo: BlogRepository) -> None:
        assert await repo.get_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_get_all_filters_by_title(self, repo: BlogRepository) -> None:
        await repo.create(blog_values("Travelling through Portugal"))
        await repo.create(blog_values("Cooking with cast iron"))
        await repo.commit()

        titles = [blog.title for blog in await repo.get_all("portugal")]

        assert titles == ["Travelling through Portugal"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("keyword", [None, "", "   "])
    async def test_blank_keyword_returns_everything(
        self,
        repo: BlogRepository,
        keyword: str | None,
    ) -> None:
        await repo.create(blog_values("First of two blogs"))
        await repo.create(blog_values("Second of two blogs"))
        await repo.commit()

        assert len(await repo.get_all(keyword)) == 2

    @pytest.mark.asyncio
    async def test_like_wildcards_are_literal(self, repo: BlogRepository) -> None:
        await repo.create(blog_values("Discounts of 100% off"))
        await repo.create(blog_values("Snake_case naming tips"))
        await repo.create(blog_values("Plain ordinary title"))
        await repo.commit()

        assert [b.title for b in await repo.get_all("%")] == ["Discounts of 100% off"]
        assert [b.title for b in await repo.get_all("_")] == ["Snake_case naming tips"]

    @pytest.mark.asyncio
    async def test_update_applies_only_set_fields(self, repo: BlogRepository) -> None:
        blog = await repo.create(blog_values(description="Original body"))
        await repo.commit()

        updated = await repo.update(blog.id, BlogUpdate(title="A brand new title"))

        assert updated is not None
        assert updated.title == "A brand new title"
        assert updated.description == "Original body"
        assert updated.image == "1700000000-x-deadbeef.jpg"
        assert updated.updated_at is not None
        assert updated.updated_at >= updated.created_at

    @pytest.mark.asyncio
    async def test_update_unknown(self, repo: BlogRepository) -> None:
        assert await repo.update(uuid4(), BlogUpdate(title="Nothing to update")) is None

    @pytest.mark.asyncio
    async def test_delete(self, repo: BlogRepository) -> None:
        blog = await repo.create(blog_values())
        await repo.commit()

        assert await repo.delete(blog.id) is True
        await repo.commit()
        assert await repo.get_by_id(blog.id) is None
        assert await repo.delete(blog.id) is False

    @pytest.mark.asyncio
    async def test_commit_failure_raises_persistence_error(self, repo: BlogRepository) -> None:
        failure = OperationalError("COMMIT", {}, Exception("database is locked"))
        with (
            patch.object(repo.session, "commit", AsyncMock(side_effect=failure)),
            pytest.raises(PersistenceError, match="Failed to commit changes"),
        ):
            await repo.commit()

    @pytest.mark.asyncio
    async def test_query_failure_raises_persistence_error(self, repo: BlogRepository) -> None:
        failure = OperationalError("SELECT", {}, Exception("no such table"))
        with (
            patch.object(repo.session, "execute", AsyncMock(side_effect=failure)),
            pytest.raises(PersistenceError, match="Failed to list blogs"),
        ):
            await repo.get_all()
