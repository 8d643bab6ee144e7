"""Service for reading posts."""

from typing import List

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Post
from ..registry import register_service
from ..repository import PostRepository
from .base import BaseService


@register_service
class PostService(BaseService[Post]):
    """Service for reading posts."""

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.repo = PostRepository(db)

    async def health_check(self) -> bool:
        """Check if the service is healthy."""
        try:
            await self.db.execute(select(Post.id).limit(1))
            return True
        except Exception as e:
            logger.warning(f"Post service health check failed: {e}")
            return False

    async def find_all(self) -> List[Post]:
        """Get every persisted post.

        Storage errors are not caught here; they reach the caller as raised.
        """
        logger.debug("Fetching all posts")
        return await self.repo.find_many()
