from app.services.blog import BlogService, ServiceResult
from app.services.storage import ImageStore, LocalImageStore, get_image_store
from app.services.validation import BlogFormValidator

__all__ = [
    "BlogFormValidator",
    "BlogService",
    "ImageStore",
    "LocalImageStore",
    "ServiceResult",
    "get_image_store",
]
