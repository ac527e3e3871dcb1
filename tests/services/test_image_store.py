# tests/services/test_image_store.py
"""Tests for the local image store."""

import re
from pathlib import Path
from unittest.mock import patch

import pytest

from app.configs import ImageStoreConfig
from app.errors import StorageWriteError
from app.services.storage import LocalImageStore, get_image_store

FILENAME_PATTERN = re.compile(r"^\d+-[a-z0-9-]+-[0-9a-f]{8}\.[a-z]+$")


class TestLocalImageStoreSave:
    """Tests for LocalImageStore.save."""

    @pytest.mark.asyncio
    async def test_save_writes_file_with_generated_name(
        self,
        image_store: LocalImageStore,
        jpeg_bytes: bytes,
    ) -> None:
        """Saved images get a timestamped, slugged, random-suffixed name."""
        filename = await image_store.save(jpeg_bytes, "jpg", "My First Blog Post!")

        assert FILENAME_PATTERN.match(filename)
        assert "-my-first-blog-post-" in filename
        assert filename.endswith(".jpg")
        assert image_store.path_for(filename).read_bytes() == jpeg_bytes

    @pytest.mark.asyncio
    async def test_save_creates_missing_directory(self, tmp_path: Path, jpeg_bytes: bytes) -> None:
        """The upload directory is created on first write."""
        store = LocalImageStore(ImageStoreConfig(directory=tmp_path / "a" / "b" / "blogs"))
        assert not store.base_path.exists()

        filename = await store.save(jpeg_bytes, "jpeg", "nested")

        assert store.base_path.is_dir()
        assert store.exists(filename)

    @pytest.mark.asyncio
    async def test_same_title_gives_distinct_names(
        self,
        image_store: LocalImageStore,
        jpeg_bytes: bytes,
    ) -> None:
        """Two saves in the same second with the same title do not collide."""
        first = await image_store.save(jpeg_bytes, "jpg", "Same title for both")
        second = await image_store.save(jpeg_bytes, "jpg", "Same title for both")

        assert first != second
        assert image_store.exists(first)
        assert image_store.exists(second)

    @pytest.mark.asyncio
    async def test_unusable_title_falls_back_to_default_slug(
        self,
        image_store: LocalImageStore,
        jpeg_bytes: bytes,
    ) -> None:
        filename = await image_store.save(jpeg_bytes, "png", "!!!")
        assert "-blog-" in filename

    @pytest.mark.asyncio
    async def test_directory_failure_raises_storage_error(
        self,
        tmp_path: Path,
        jpeg_bytes: bytes,
    ) -> None:
        """A file where the directory should be makes the write fail."""
        blocker = tmp_path / "blocked"
        blocker.write_text("not a directory")
        store = LocalImageStore(ImageStoreConfig(directory=blocker / "blogs"))

        with pytest.raises(StorageWriteError):
            await store.save(jpeg_bytes, "jpg", "cannot write here")

    @pytest.mark.asyncio
    async def test_write_failure_raises_and_leaves_no_file(
        self,
        image_store: LocalImageStore,
        jpeg_bytes: bytes,
    ) -> None:
        with (
            patch("app.services.storage.local.aiofiles.open", side_effect=OSError("disk full")),
            pytest.raises(StorageWriteError, match="disk full"),
        ):
            await image_store.save(jpeg_bytes, "jpg", "disk is full today")

        assert list(image_store.base_path.iterdir()) == []


class TestLocalImageStoreDelete:
    """Tests for LocalImageStore.delete."""

    @pytest.mark.asyncio
    async def test_delete_removes_file(self, image_store: LocalImageStore, jpeg_bytes: bytes) -> None:
        filename = await image_store.save(jpeg_bytes, "jpg", "to be removed")

        assert await image_store.delete(filename) is True
        assert not image_store.exists(filename)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("filename", [None, ""])
    async def test_delete_without_name_is_noop(
        self,
        image_store: LocalImageStore,
        filename: str | None,
    ) -> None:
        assert await image_store.delete(filename) is False

    @pytest.mark.asyncio
    async def test_delete_missing_file_is_idempotent(self, image_store: LocalImageStore) -> None:
        assert await image_store.delete("1700000000-gone-deadbeef.jpg") is False

    @pytest.mark.asyncio
    async def test_delete_failure_raises_storage_error(
        self,
        image_store: LocalImageStore,
        jpeg_bytes: bytes,
    ) -> None:
        filename = await image_store.save(jpeg_bytes, "jpg", "locked file here")

        with (
            patch(
                "app.services.storage.local.aiofiles.os.remove",
                side_effect=PermissionError("read-only"),
            ),
            pytest.raises(StorageWriteError),
        ):
            await image_store.delete(filename)

        assert image_store.exists(filename)


class TestLocalImageStorePaths:
    """Tests for path and URL helpers."""

    def test_path_for_uses_basename_only(self, image_store: LocalImageStore) -> None:
        assert image_store.path_for("../../etc/passwd") == image_store.base_path / "passwd"

    def test_url_for(self, image_store: LocalImageStore) -> None:
        assert image_store.url_for("a.jpg") == "/uploads/blogs/a.jpg"
        assert image_store.url_for(None) is None

    def test_exists_false_for_empty_name(self, image_store: LocalImageStore) -> None:
        assert image_store.exists("") is False

    def test_get_image_store_returns_local_store(self, tmp_path: Path) -> None:
        store = get_image_store(ImageStoreConfig(directory=tmp_path))
        assert isinstance(store, LocalImageStore)
        assert store.base_path == tmp_path
