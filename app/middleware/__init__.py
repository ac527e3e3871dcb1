from app.middleware.context import RequestContextMiddleware
from app.middleware.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)

__all__ = [
    "LoggingMiddleware",
    "RequestContextMiddleware",
    "SecurityHeadersMiddleware",
    "configure_cors",
    "lifespan",
]
