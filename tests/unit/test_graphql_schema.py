"""Unit tests for the GraphQL schema and posts resolver."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from posts_api.core.models import Post
from posts_api.core.services import PostService
from posts_api.gql import schema
from posts_api.gql.export import main as export_main
from posts_api.gql.export import schema_sdl, write_schema_file

POSTS_QUERY = "query { posts { id title } }"


def _context():
    return SimpleNamespace(post_service=PostService(AsyncMock(spec=AsyncSession)))


@pytest.mark.unit
class TestPostsResolver:
    """Test the posts query against the schema directly."""

    @pytest.mark.asyncio
    async def test_posts_maps_rows_to_public_fields(self):
        rows = [
            Post(id="1", title="First", content="hidden"),
            Post(id="2", title="Second", content="also hidden"),
        ]
        with patch.object(PostService, "find_all", AsyncMock(return_value=rows)):
            result = await schema.execute(POSTS_QUERY, context_value=_context())

        assert result.errors is None
        assert result.data == {
            "posts": [
                {"id": "1", "title": "First"},
                {"id": "2", "title": "Second"},
            ]
        }

    @pytest.mark.asyncio
    async def test_posts_empty(self):
        with patch.object(PostService, "find_all", AsyncMock(return_value=[])):
            result = await schema.execute(POSTS_QUERY, context_value=_context())

        assert result.errors is None
        assert result.data == {"posts": []}

    @pytest.mark.asyncio
    async def test_storage_error_reaches_graphql_errors_unchanged(self):
        error = OperationalError("SELECT", {}, Exception("connection refused"))
        with patch.object(PostService, "find_all", AsyncMock(side_effect=error)):
            result = await schema.execute(POSTS_QUERY, context_value=_context())

        assert result.data is None
        assert len(result.errors) == 1
        assert result.errors[0].original_error is error
        assert result.errors[0].path == ["posts"]

    @pytest.mark.asyncio
    async def test_storage_only_fields_are_not_queryable(self):
        result = await schema.execute(
            "query { posts { id title content } }", context_value=_context()
        )

        assert result.errors
        assert "content" in result.errors[0].message


@pytest.mark.unit
class TestSchemaExport:
    """Test SDL rendering and the export command."""

    def test_sdl_declares_post_and_posts(self):
        sdl = schema_sdl()

        assert "type Post {" in sdl
        assert "id: String!" in sdl
        assert "title: String!" in sdl
        assert "posts: [Post!]!" in sdl
        assert "content" not in sdl

    def test_sorted_sdl_orders_types(self):
        sdl = schema_sdl(sort=True)

        assert sdl.index("type Post {") < sdl.index("type Query {")

    def test_unsorted_sdl_keeps_same_definitions(self):
        assert "posts: [Post!]!" in schema_sdl(sort=False)

    def test_write_schema_file(self, tmp_path):
        target = tmp_path / "nested" / "schema.graphql"

        written = write_schema_file(target)

        assert written == target
        assert target.read_text(encoding="utf-8") == schema_sdl() + "\n"

    def test_export_command_writes_path(self, tmp_path):
        target = tmp_path / "schema.graphql"

        assert export_main([str(target)]) == 0
        assert "posts: [Post!]!" in target.read_text(encoding="utf-8")

    def test_export_command_prints_to_stdout(self, capsys):
        with patch("posts_api.gql.export.get_settings") as mock_settings:
            mock_settings.return_value.schema_file = None
            mock_settings.return_value.sort_schema = True
            assert export_main([]) == 0

        assert "type Post {" in capsys.readouterr().out
