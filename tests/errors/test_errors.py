# tests/errors/test_errors.py
"""Tests for app/errors."""

from unittest.mock import MagicMock

import pytest
from fastapi.exceptions import RequestValidationError

from app.errors import (
    BaseAppError,
    NotFoundError,
    PersistenceError,
    StorageWriteError,
    ValidationError,
    create_exception_handler,
    validation_exception_handler,
)


def mock_request() -> MagicMock:
    request = MagicMock()
    request.client.host = "192.168.1.1"
    request.url.path = "/blogs"
    return request


class TestErrorClasses:
    """Tests for the application error types."""

    def test_base_defaults(self) -> None:
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500
        assert str(error) == "Internal Server Error"

    def test_not_found(self) -> None:
        error = NotFoundError()
        assert error.status_code == 404
        assert error.detail == "Blog not found"

    def test_validation_error_carries_field_errors(self) -> None:
        error = ValidationError(errors={"title": ["The title field is required."]})
        assert error.status_code == 422
        assert error.detail == "Validation failed"
        assert error.errors == {"title": ["The title field is required."]}

    @pytest.mark.parametrize("error_type", [StorageWriteError, PersistenceError])
    def test_server_side_errors(self, error_type: type[BaseAppError]) -> None:
        error = error_type("something broke")
        assert error.status_code == 500
        assert error.detail == "something broke"


class TestExceptionHandlers:
    """Tests for the envelope-producing handlers."""

    @pytest.mark.asyncio
    async def test_handler_renders_envelope(self) -> None:
        handler = create_exception_handler(MagicMock())

        response = await handler(mock_request(), NotFoundError())

        assert response.status_code == 404
        assert response.body == b'{"status":false,"message":"Blog not found"}'

    @pytest.mark.asyncio
    async def test_handler_includes_field_errors(self) -> None:
        handler = create_exception_handler(MagicMock())
        error = ValidationError(errors={"author": ["The author field is required."]})

        response = await handler(mock_request(), error)

        assert response.status_code == 422
        assert b'"errors":{"author":["The author field is required."]}' in response.body

    @pytest.mark.asyncio
    async def test_request_validation_handler(self) -> None:
        exc = RequestValidationError(
            [{"loc": ("path", "blog_id"), "msg": "Input should be a valid UUID", "type": "uuid_parsing"}],
        )

        response = await validation_exception_handler(mock_request(), exc)

        assert response.status_code == 422
        assert b'"errors":{"blog_id":["Input should be a valid UUID"]}' in response.body
        assert b'"message":"Validation failed"' in response.body
