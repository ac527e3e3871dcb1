# app/middleware/context.py
"""
Middleware binding a request ID to the logging context.

Every log line written while a request is processed carries its
``request_id``; the same value is echoed in the ``X-Request-ID`` header.
"""

from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.monitoring import bind_request_id, clear_context

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Bind a request ID for the request lifecycle.

    Reuses an incoming ``X-Request-ID`` header when present, otherwise
    generates one. The context is cleared afterwards so nothing leaks into
    the next request handled by the same task.

    Examples
    --------
    >>> app.add_middleware(RequestContextMiddleware)
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_request_id(request_id)

        try:
            response = await call_next(request)
        finally:
            clear_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
