#!/usr/bin/env python
"""Initialize the database with tables."""

import asyncio

from loguru import logger
from sqlalchemy.engine import make_url

from posts_api.core.config import get_settings
from posts_api.core.database import dispose_engine, init_database
from posts_api.core.logging import configure_logging


async def _init() -> None:
    try:
        await init_database()
    finally:
        await dispose_engine()


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    url = make_url(settings.connection_url).render_as_string(hide_password=True)
    logger.info(f"Initializing database at {url}")
    asyncio.run(_init())


if __name__ == "__main__":
    main()
