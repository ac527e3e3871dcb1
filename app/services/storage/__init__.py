"""
Storage services package.

This package provides the image store used for blog uploads.
"""

from app.configs import ImageStoreConfig
from app.services.storage.base import ImageStore
from app.services.storage.local import LocalImageStore


def get_image_store(config: ImageStoreConfig) -> ImageStore:
    """
    Get the configured image store.

    Args:
        config: Image store configuration

    Returns:
        ImageStore: Local filesystem store
    """
    return LocalImageStore(config)


__all__ = [
    "ImageStore",
    "LocalImageStore",
    "get_image_store",
]
