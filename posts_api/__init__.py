"""GraphQL API exposing the posts table."""

__version__ = "0.1.0"
