"""Core configuration settings for the server."""

from enum import Enum
from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Server settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POSTS_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service settings
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    service_name: str = "posts-api"

    # Logging settings
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    reload: bool = False
    cors_origins: str = "*"

    # Database settings
    database_url: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "posts"
    db_user: str = "postgres"
    db_password: str = "postgres"

    # GraphQL schema export
    schema_file: Optional[str] = None
    sort_schema: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def connection_url(self) -> str:
        """Get database connection URL."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def cors_origin_list(self) -> List[str]:
        """Parse the comma-separated CORS origins."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached server settings instance.

    Returns:
        Settings instance loaded from the environment
    """
    return Settings()
