"""Database configuration and session management."""

from typing import Optional

from loguru import logger
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .config import get_settings
from .models import Base

_engine: Optional[AsyncEngine] = None
_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


def create_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given URL.

    Pool sizing only applies to server databases; SQLite uses its own pool.
    """
    if make_url(url).get_backend_name() == "sqlite":
        return create_async_engine(url, echo=echo)
    return create_async_engine(
        url,
        echo=echo,
        pool_size=20,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,
    )


def use_engine(engine: AsyncEngine) -> None:
    """Bind the session factory to an existing engine."""
    global _engine, _session_maker
    _engine = engine
    _session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


def get_engine() -> AsyncEngine:
    """Get the process-wide engine, creating it from settings on first use."""
    if _engine is None:
        settings = get_settings()
        use_engine(create_engine(settings.connection_url, echo=settings.debug))
    return _engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the session factory bound to the current engine."""
    if _session_maker is None:
        get_engine()
    return _session_maker


async def dispose_engine() -> None:
    """Close all pooled connections and forget the engine."""
    global _engine, _session_maker
    if _engine is not None:
        await _engine.dispose()
        logger.debug("Database engine disposed")
    _engine = None
    _session_maker = None


async def init_database(engine: Optional[AsyncEngine] = None) -> None:
    """Create all database tables."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")
