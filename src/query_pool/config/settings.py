"""
Configuration management for query-pool.

This module provides environment-based configuration using Pydantic BaseSettings,
so the pool connector can be deployed across development, testing, and
production environments without code changes.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("QP_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class DatabaseSettings:
    """
    Database settings wrapper for unified DSN retrieval.

    Supports both component-based and URI-based connection string generation.
    """

    def __init__(
        self,
        host: str,
        port: int = 5432,
        user: str = "",
        password: str = "",
        db: str = "",
        uri: Optional[str] = None,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.db = db
        self.uri = uri

    def get_connection_string(self) -> str:
        """
        Get PostgreSQL connection string.

        Returns:
            Database connection string (DSN)
        """
        if self.uri:
            return self.uri
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the QP_ prefix. For example,
    QP_DB_POOL_SIZE overrides ``db_pool_size`` and QP_DATABASE__URI (or
    QP_DATABASE_URI) provides a complete DSN.
    """

    ENVIRONMENT: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        validation_alias=AliasChoices("QP_ENVIRONMENT", "ENVIRONMENT"),
        description="Deployment environment",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias=AliasChoices("QP_LOG_LEVEL", "LOG_LEVEL"),
        description="Logging level (uppercase)",
    )

    database_host: str = Field(default="localhost", description="Database host")
    database_port: int = Field(default=5432, description="Database port")
    database_user: str = Field(default="postgres", description="Database user")
    database_password: str = Field(default="", description="Database password")
    database_db: str = Field(default="postgres", description="Database name")
    database_uri: Optional[str] = Field(
        default=None,
        description="Complete database URI",
        validation_alias=AliasChoices("QP_DATABASE__URI", "QP_DATABASE_URI"),
    )

    db_pool_min_size: int = Field(
        default=1, ge=0, description="Minimum connections kept open by the pool"
    )
    db_pool_size: int = Field(
        default=10, ge=1, description="Maximum connections in the pool"
    )
    db_command_timeout: Optional[float] = Field(
        default=None,
        description="Per-statement timeout in seconds (None = driver default)",
    )
    db_connect_timeout: float = Field(
        default=5.0, gt=0, description="Connection establishment timeout in seconds"
    )

    @property
    def database(self) -> DatabaseSettings:
        """Database settings assembled from individual configuration fields."""
        return DatabaseSettings(
            host=self.database_host,
            port=self.database_port,
            user=self.database_user,
            password=self.database_password,
            db=self.database_db,
            uri=self.database_uri,
        )

    def get_database_connection_string(self) -> str:
        """Get the PostgreSQL connection string.

        Priority order:
        1) QP_DATABASE__URI / QP_DATABASE_URI
        2) Construct from individual QP_DATABASE_* components

        ``postgres://`` is rewritten to ``postgresql://``.
        """
        final_uri = self.database.get_connection_string()
        if final_uri.startswith("postgres://"):
            final_uri = final_uri.replace("postgres://", "postgresql://", 1)
        return final_uri

    @model_validator(mode="after")
    def validate_pool_bounds(self) -> "Settings":
        """Reject a minimum pool size larger than the maximum."""
        if self.db_pool_min_size > self.db_pool_size:
            raise ValueError(
                f"db_pool_min_size ({self.db_pool_min_size}) must not exceed "
                f"db_pool_size ({self.db_pool_size})"
            )
        return self

    model_config = SettingsConfigDict(
        env_prefix="QP_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused; tests call ``get_settings.cache_clear()``
    after changing the environment.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
