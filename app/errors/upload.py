"""
Upload-related error classes.

This module defines custom exceptions for image storage operations.
"""

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from app.errors.base import BaseAppError, create_exception_handler
from app.monitoring import get_logger

logger = get_logger(__name__)


class UploadError(BaseAppError):
    """Base exception for upload-related errors."""

    def __init__(
        self,
        detail: str = "We couldn't upload your file. Please try again.",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)


class StorageWriteError(UploadError):
    """Exception raised when the image directory or file cannot be written or removed."""

    def __init__(self, detail: str = "We couldn't save your file. Please try again later.") -> None:
        super().__init__(detail=detail, status_code=HTTP_500_INTERNAL_SERVER_ERROR)


# Create exception handler for upload errors
upload_exception_handler = create_exception_handler(logger)
