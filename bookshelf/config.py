"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

Every value has a default that matches a plain local setup (MongoDB on
127.0.0.1:27017, server on port 5000), so the API runs without any
environment variables. Any setting can be overridden with an environment
variable of the same name (case-insensitive) or a `.env` file.

Usage:
    from bookshelf.config import get_settings

    settings = get_settings()
    print(settings.mongodb_url)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic Settings automatically:
    1. Reads from environment variables (case-insensitive)
    2. Falls back to .env file if env var not found
    3. Validates types and raises errors for invalid values
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Bookshelf GraphQL API",
        description="Application name displayed in logs and the root endpoint"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, auto-reload)"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=5000,
        description="Port to bind the server to"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    mongodb_url: str = Field(
        default="mongodb://127.0.0.1:27017",
        description="MongoDB connection URL (host and port)"
    )
    mongodb_database: str = Field(
        default="playlist",
        description="Name of the MongoDB database holding books and authors"
    )
    mongodb_timeout_ms: int = Field(
        default=5000,
        description="Server selection timeout in milliseconds"
    )

    # -------------------------------------------------------------------------
    # GraphQL Settings
    # -------------------------------------------------------------------------
    graphql_ide: str = Field(
        default="graphiql",
        description="Interactive IDE served on GET /graphql (empty to disable)"
    )
    page_size: int = Field(
        default=10,
        ge=1,
        description="Number of records returned by paginated list queries"
    )
    enforce_author_reference: bool = Field(
        default=True,
        description="Reject new books whose authorId does not match an author"
    )

    # -------------------------------------------------------------------------
    # Security Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins ('*' for all)"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def graphql_ide_option(self) -> str | None:
        """Value handed to Strawberry's `graphql_ide` (None disables the IDE)."""
        return self.graphql_ide or None

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("graphql_ide")
    @classmethod
    def validate_graphql_ide(cls, v: str) -> str:
        """Only the IDEs Strawberry ships are accepted."""
        valid_ides = {"", "graphiql", "apollo-sandbox", "pathfinder"}
        if v.lower() not in valid_ides:
            raise ValueError(f"graphql_ide must be one of {valid_ides}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    The first call creates the Settings instance (reading the environment
    and .env); subsequent calls return the same instance.
    """
    return Settings()
