"""GraphQL queries."""

from typing import List

import strawberry
from loguru import logger

from .context import Context
from .types import PostType


@strawberry.type
class Query:
    """GraphQL query type."""

    @strawberry.field(description="All posts in storage order")
    async def posts(self, info: strawberry.Info[Context, None]) -> List[PostType]:
        try:
            posts = await info.context.post_service.find_all()
        except Exception as e:
            logger.error(f"Error fetching posts: {e}")
            raise

        logger.debug(f"Resolved {len(posts)} posts")
        return [PostType.from_model(post) for post in posts]
