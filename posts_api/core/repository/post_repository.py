"""Repository for posts."""

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Post
from .base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """Repository for posts."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Post)
