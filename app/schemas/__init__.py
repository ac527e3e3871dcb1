from app.schemas.blog import BlogCreate, BlogForm, BlogResponse, BlogUpdate
from app.schemas.response import ApiResponse

__all__ = [
    "ApiResponse",
    "BlogCreate",
    "BlogForm",
    "BlogResponse",
    "BlogUpdate",
]
