from .base import BaseRepository
from .post_repository import PostRepository

__all__ = [
    "BaseRepository",
    "PostRepository",
]
