# app/main.py

"""Blog Publisher - create, browse, search, edit and delete blog posts."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from app.configs import BlogConfig, settings
from app.db import ping_db
from app.errors import (
    NotFoundError,
    PersistenceError,
    UploadError,
    database_exception_handler,
    upload_exception_handler,
    validation_exception_handler,
)
from app.managers import limiter, rate_limit_exceeded_handler
from app.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from app.routes import blog_router, frontend_router
from app.routes.frontend import TEMPLATES_DIR
from app.utils.helpers import today_str

STATIC_DIR = TEMPLATES_DIR.parent / "static"

app = FastAPI(
    title=settings.APP_NAME,
    description="Create, browse, search, edit and delete blog posts",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
# Added last so the request ID is bound before any other middleware logs
app.add_middleware(RequestContextMiddleware)

routes = [blog_router, frontend_router]

_ = [app.include_router(router) for router in routes]

errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (PersistenceError, database_exception_handler),
    (NotFoundError, database_exception_handler),
    (UploadError, upload_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
app.mount(
    BlogConfig.from_settings(settings).store.url_prefix,
    StaticFiles(directory=settings.blog_uploads_dir, check_dir=False),
    name="uploads",
)


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 10:00:00",
                        "database": "reachable",
                    },
                },
            },
        },
        503: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "degraded",
                        "timestamp": "2025-01-01 10:00:00",
                        "database": "unreachable",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> ORJSONResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    ORJSONResponse
        Version, timestamp and database reachability; 503 when the
        database cannot be reached.
    """
    database_ok = await ping_db()
    return ORJSONResponse(
        status_code=200 if database_ok else HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "version": app.version,
            "status": "ok" if database_ok else "degraded",
            "timestamp": today_str(),
            "database": "reachable" if database_ok else "unreachable",
        },
    )
