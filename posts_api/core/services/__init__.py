from posts_api.core.services.base import BaseService
from posts_api.core.services.post_service import PostService

__all__ = [
    "BaseService",
    "PostService",
]
