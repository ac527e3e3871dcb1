"""
Base storage protocol for blog image files.

This module defines the interface the blog service relies on, so that a
different backend can replace the local filesystem store.
"""

from abc import abstractmethod
from pathlib import Path
from typing import Protocol


class ImageStore(Protocol):
    """
    Protocol defining the interface for image stores.

    Filenames are generated by the store, never supplied by clients.
    """

    @abstractmethod
    async def save(self, file_data: bytes, extension: str, slug_hint: str) -> str:
        """
        Store an image and return the generated filename.

        Args:
            file_data: Raw image bytes
            extension: Original file extension, without the dot
            slug_hint: Text used to make the filename readable (the title)

        Returns:
            str: Stored filename

        Raises:
            StorageWriteError: If the directory or file cannot be written
        """
        ...

    @abstractmethod
    async def delete(self, filename: str | None) -> bool:
        """
        Remove a stored image.

        Args:
            filename: Stored filename; ``None`` or empty is a no-op

        Returns:
            bool: True if a file was removed, False if there was nothing to remove

        Raises:
            StorageWriteError: If an existing file cannot be removed
        """
        ...

    @abstractmethod
    def exists(self, filename: str) -> bool:
        """Return True when ``filename`` is present in the store."""
        ...

    @abstractmethod
    def path_for(self, filename: str) -> Path:
        """Return the filesystem path of ``filename``."""
        ...

    @abstractmethod
    def url_for(self, filename: str | None) -> str | None:
        """Return the public URL of ``filename``, or None."""
        ...
