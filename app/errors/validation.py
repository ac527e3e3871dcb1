"""Custom validation error handling for FastAPI."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_422_UNPROCESSABLE_CONTENT

from app.configs import file_logger
from app.errors.base import BaseAppError, host

logger = file_logger(getLogger(__name__))

type FieldErrors = dict[str, list[str]]


class ValidationError(BaseAppError):
    """Missing or malformed fields, reported per field."""

    def __init__(
        self,
        detail: str = "Validation failed",
        errors: FieldErrors | None = None,
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_422_UNPROCESSABLE_CONTENT)
        self.errors = errors or {}


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Render FastAPI request validation errors as a field-keyed envelope.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with ``{"status": false, "message", "errors"}``.
    """
    exec_error = cast(RequestValidationError, exc)

    errors: FieldErrors = {}
    for error in exec_error.errors():
        loc = error.get("loc", [])
        # Skip the location kind ('body', 'path', 'query')
        field = ".".join(str(part) for part in loc[1:]) or "request"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        content={
            "status": False,
            "message": "Validation failed",
            "errors": errors,
        },
    )
