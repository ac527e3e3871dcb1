from app.routes.blog import router as blog_router
from app.routes.frontend import router as frontend_router

__all__ = ["blog_router", "frontend_router"]
