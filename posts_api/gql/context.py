"""GraphQL context definitions."""

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from ..core.registry import get_service_factory
from ..core.services import PostService


class Context(BaseContext):
    """Per-request GraphQL context.

    The session is the one opened by ``DatabaseMiddleware`` for this request,
    so every resolver in a single query shares it.
    """

    def __init__(self, request: Request):
        super().__init__()
        self.request = request

    @property
    def session(self) -> AsyncSession:
        return self.request.state.db

    @property
    def post_service(self) -> PostService:
        return get_service_factory(PostService)(self.session)


async def get_context(request: Request) -> Context:
    return Context(request=request)
