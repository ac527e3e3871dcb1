from app.errors.base import BaseAppError, create_exception_handler
from app.errors.database import (
    DatabaseInitializationError,
    NotFoundError,
    PersistenceError,
    database_exception_handler,
)
from app.errors.upload import StorageWriteError, UploadError, upload_exception_handler
from app.errors.validation import (
    FieldErrors,
    ValidationError,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "DatabaseInitializationError",
    "FieldErrors",
    "NotFoundError",
    "PersistenceError",
    "StorageWriteError",
    "UploadError",
    "ValidationError",
    "create_exception_handler",
    "database_exception_handler",
    "upload_exception_handler",
    "validation_exception_handler",
]
