from .graphql import graphql_app, schema

__all__ = ["graphql_app", "schema"]
