"""Primitive environment values, read straight from the process environment and .env."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Environment and deployment
    environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )
    log_level: str = Field(default="INFO")

    database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

    # PostgreSQL connection
    postgres_user: str | None = Field(default=None)
    postgres_password: str | None = Field(default=None)
    postgres_host: str | None = Field(default=None)
    postgres_database: str | None = Field(default=None)
    postgres_port: int = Field(default=5432)

    # Authentication
    better_auth_secret: str | None = Field(default=None)
    better_auth_url: str = Field(default="http://localhost:8000")

    @property
    def has_postgres_settings(self) -> bool:
        """True when every required POSTGRES_* value is present."""
        return all(
            (
                self.postgres_user,
                self.postgres_password,
                self.postgres_host,
                self.postgres_database,
            )
        )
