"""
Local filesystem image store.

Blog images are written under ``<PUBLIC_DIR>/uploads/blogs`` and served
from ``/uploads/blogs``.
"""

from pathlib import Path
from secrets import token_hex
from time import time

import aiofiles
import aiofiles.os

from app.configs import ImageStoreConfig
from app.errors.upload import StorageWriteError
from app.monitoring import get_logger
from app.utils.helpers import slugify

logger = get_logger(__name__)


class LocalImageStore:
    """
    Local filesystem image store.

    Filenames are ``<unix-time>-<slug>-<random hex>.<ext>`` so two uploads
    with the same title in the same second still get distinct names.
    """

    def __init__(self, config: ImageStoreConfig) -> None:
        """
        Initialize the store.

        Args:
            config: Directory, public URL prefix and directory mode
        """
        self.config = config
        self.base_path = Path(config.directory)

    def _ensure_directory(self) -> None:
        """Create the upload directory (and parents) if it is missing."""
        if self.base_path.is_dir():
            return
        try:
            self.base_path.mkdir(mode=self.config.dir_mode, parents=True, exist_ok=True)
        except OSError as e:
            mssg = f"Could not create upload directory {self.base_path}: {e.strerror or e}"
            raise StorageWriteError(mssg) from e

    def _build_filename(self, extension: str, slug_hint: str) -> str:
        ext = extension.lower().lstrip(".") or "bin"
        return f"{int(time())}-{slugify(slug_hint)}-{token_hex(4)}.{ext}"

    def path_for(self, filename: str) -> Path:
        """
        Get the file path for a stored image.

        Only the final path component is used, so names cannot escape
        the upload directory.
        """
        return self.base_path / Path(filename).name

    def exists(self, filename: str) -> bool:
        return bool(filename) and self.path_for(filename).is_file()

    def url_for(self, filename: str | None) -> str | None:
        if not filename:
            return None
        return f"{self.config.url_prefix.rstrip('/')}/{Path(filename).name}"

    async def save(self, file_data: bytes, extension: str, slug_hint: str) -> str:
        """
        Write an uploaded image to the upload directory.

        Args:
            file_data: Raw image bytes
            extension: Original file extension
            slug_hint: Text the filename slug is derived from

        Returns:
            str: Generated filename

        Raises:
            StorageWriteError: If the directory cannot be created or the
                file cannot be written
        """
        self._ensure_directory()
        filename = self._build_filename(extension, slug_hint)
        file_path = self.path_for(filename)

        try:
            async with aiofiles.open(file_path, "wb") as f:
                await f.write(file_data)
        except OSError as e:
            # Do not leave a truncated file behind
            file_path.unlink(missing_ok=True)
            mssg = f"Could not write image {filename}: {e.strerror or e}"
            raise StorageWriteError(mssg) from e

        logger.info("Stored blog image", filename=filename, size=len(file_data))
        return filename

    async def delete(self, filename: str | None) -> bool:
        """
        Delete a stored image.

        A missing file is not an error.

        Args:
            filename: Stored filename, may be None

        Returns:
            bool: True if a file was removed, False otherwise

        Raises:
            StorageWriteError: If the file exists but cannot be removed
        """
        if not filename:
            return False

        file_path = self.path_for(filename)
        try:
            await aiofiles.os.remove(file_path)
        except FileNotFoundError:
            return False
        except OSError as e:
            mssg = f"Could not delete image {filename}: {e.strerror or e}"
            raise StorageWriteError(mssg) from e

        logger.info("Deleted blog image", filename=filename)
        return True
