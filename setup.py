#!/usr/bin/env python3
"""Setup script for posts-api."""

from setuptools import find_packages, setup

setup(
    name="posts-api",
    version="0.1.0",
    description="GraphQL API exposing the posts table",
    packages=find_packages(include=["posts_api", "posts_api.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110,<0.137",
        "uvicorn[standard]>=0.27",
        "strawberry-graphql>=0.220",
        "graphql-core>=3.2",
        "sqlalchemy[asyncio]>=2.0",
        "asyncpg>=0.29",
        "aiosqlite>=0.19",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "loguru>=0.7",
        "prometheus-client>=0.19",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "httpx>=0.26",
        ],
    },
    entry_points={
        "console_scripts": [
            "posts-api=posts_api.main:run",
            "posts-api-init-db=posts_api.init_db:main",
            "posts-api-schema=posts_api.gql.export:main",
        ],
    },
)
