"""GraphQL type definitions."""

import strawberry

from ..core.models import Post


@strawberry.type(name="Post")
class PostType:
    """Public shape of a post."""

    id: str = strawberry.field(description="Unique identifier of the post")
    title: str = strawberry.field(description="Title of the post")

    @classmethod
    def from_model(cls, post: Post) -> "PostType":
        """Build the public type from a row, dropping storage-only columns."""
        return cls(id=post.id, title=post.title)
