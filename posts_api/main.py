"""Main server application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from . import __version__
from .core.config import get_settings
from .core.database import dispose_engine
from .core.logging import configure_logging
from .core.middleware import DatabaseMiddleware, PrometheusMiddleware
from .gql import graphql_app
from .gql.export import write_schema_file
from .routes import metrics_router
from .routes import router as api_router

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application lifespan events.

    Configures logging and writes the GraphQL schema file on startup,
    and releases pooled database connections on shutdown.
    """
    try:
        configure_logging(settings)
        logger.info(f"Starting {settings.service_name}...")
        logger.info(f"Environment: {settings.environment.value}")

        if settings.schema_file:
            write_schema_file(settings.schema_file, sort=settings.sort_schema)

        logger.info(
            "Server configured with host={}, port={}, debug={}",
            settings.api_host,
            settings.api_port,
            settings.debug,
        )

        yield

    except Exception as e:
        logger.error(f"Failed to start {settings.service_name}: {e}")
        raise
    finally:
        logger.info("Server shutting down...")
        await dispose_engine()


# Create FastAPI application
app = FastAPI(
    title=settings.service_name,
    description="GraphQL API for posts",
    debug=settings.debug,
    version=__version__,
    lifespan=lifespan,
    redirect_slashes=False,
)

# Add database middleware
app.add_middleware(DatabaseMiddleware)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)

# Added last so it is the outermost middleware and times the whole stack
app.add_middleware(PrometheusMiddleware)

# Include GraphQL router
app.include_router(graphql_app, prefix="/graphql")

# Include API routers
app.include_router(api_router, prefix="/api")

# Prometheus scraping
app.include_router(metrics_router, prefix="/metrics", tags=["metrics"])


def run() -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "posts_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.reload,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    run()
