"""Common test fixtures and configuration."""

import os
import sys
from typing import AsyncGenerator, Callable, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

# Keep any engine created from settings on SQLite during tests
os.environ.setdefault("POSTS_API_ENVIRONMENT", "testing")
os.environ.setdefault("POSTS_API_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from posts_api.core.database import dispose_engine, get_session_maker, use_engine  # noqa: E402
from posts_api.core.models import Base, Post  # noqa: E402
from posts_api.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def _memory_engine() -> AsyncEngine:
    return create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with the posts table and bind the app to it."""
    engine = _memory_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    use_engine(engine)
    yield engine
    await dispose_engine()


@pytest_asyncio.fixture
async def empty_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Bind the app to an in-memory database without any tables."""
    engine = _memory_engine()
    use_engine(engine)
    yield engine
    await dispose_engine()


@pytest_asyncio.fixture
async def unreachable_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Bind the app to a SQLite file in a directory that does not exist."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'posts.db'}"
    )
    use_engine(engine)
    yield engine
    await dispose_engine()


@pytest.fixture
def create_posts(test_engine) -> Callable:
    """Factory inserting posts and returning them in insertion order."""

    async def _create(*titles: str) -> List[Post]:
        posts = [
            Post(id=f"post-{index}", title=title, content=f"Body of {title}")
            for index, title in enumerate(titles, start=1)
        ]
        async with get_session_maker()() as session:
            session.add_all(posts)
            await session.commit()
        return posts

    return _create


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as test_client:
        yield test_client


@pytest.fixture
def restore_logger():
    """Put loguru back to its default stderr sink after a test reconfigures it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
