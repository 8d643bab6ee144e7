"""GraphQL application configuration."""

import strawberry
from strawberry.fastapi import GraphQLRouter

from ..core.config import get_settings
from .context import Context, get_context
from .queries import Query

# Create GraphQL schema and router
schema = strawberry.Schema(query=Query)

graphql_app = GraphQLRouter[Context, None](
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if get_settings().debug else None,
)
