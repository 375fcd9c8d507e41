"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field
from sqlalchemy.engine import URL


class DatabaseConfigError(ValueError):
    """Raised when the PostgreSQL settings are incomplete."""


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str | None = Field(
        default=None,
        description="Full database URL; overrides the individual POSTGRES_* settings",
    )
    user: str | None = Field(default=None, description="Database username")
    password: str | None = Field(default=None, description="Database password")
    host: str | None = Field(default=None, description="Database host")
    database: str | None = Field(default=None, description="Database name")
    port: int = Field(default=5432, description="Database port")
    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")

    @property
    def missing_settings(self) -> list[str]:
        """Names of the required POSTGRES_* settings that are not set."""
        required = {
            "POSTGRES_USER": self.user,
            "POSTGRES_PASSWORD": self.password,
            "POSTGRES_HOST": self.host,
            "POSTGRES_DATABASE": self.database,
        }
        return [name for name, value in required.items() if not value]

    @property
    def connection_string(self) -> str:
        """Construct the database connection string.

        An explicit ``url`` wins. Otherwise every POSTGRES_* setting must be present.
        """
        if self.url:
            return self.url

        missing = self.missing_settings
        if missing:
            raise DatabaseConfigError(
                "Missing required PostgreSQL environment variables "
                f"({', '.join(missing)}). Check the .env file for this environment."
            )

        # psycopg2 is the installed driver; URL.create escapes the credentials
        return URL.create(
            "postgresql+psycopg2",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        ).render_as_string(hide_password=False)

    @property
    def is_postgres(self) -> bool:
        """True unless an explicit non-PostgreSQL ``url`` is configured."""
        return self.url is None or self.url.startswith("postgresql")


class AuthConfig(BaseModel):
    """Email/password authentication and session cookie configuration."""

    secret: str = Field(
        default="dev-auth-secret", description="Secret used to sign session cookies"
    )
    base_url: str = Field(
        default="http://localhost:8000", description="Public base URL of the app"
    )
    session_max_age: int = Field(
        default=60 * 60 * 24 * 7, description="Session lifetime in seconds"
    )
    cookie_name: str = Field(
        default="catalog_demo.session_token", description="Session cookie name"
    )
    secure_cookies: bool = Field(
        default=False, description="Mark the session cookie as Secure"
    )
    min_password_length: int = Field(default=8, description="Minimum password length")
    max_password_length: int = Field(default=128, description="Maximum password length")


class ProductsConfig(BaseModel):
    """Product listing configuration."""

    items_per_page: int = Field(default=20, description="Rows per listing page")


class PlaceholderApiConfig(BaseModel):
    """Public JSON test API used by the posts and users pages."""

    base_url: str = Field(default="https://jsonplaceholder.typicode.com")
    timeout: float = Field(default=10.0, description="Request timeout in seconds")
    posts_limit: int = Field(default=5, description="Number of posts to render")


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class ConfigData(BaseModel):
    """Root of config.yaml."""

    app: AppConfig = Field(default_factory=AppConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    products: ProductsConfig = Field(default_factory=ProductsConfig)
    placeholder_api: PlaceholderApiConfig = Field(default_factory=PlaceholderApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def warn_on_insecure_defaults(self) -> None:
        """Log the settings that should never reach production unchanged."""
        if self.app.environment != "production":
            return
        if self.auth.secret == "dev-auth-secret":
            logger.warning("BETTER_AUTH_SECRET is not set; using the development secret")
        if not self.auth.secure_cookies:
            logger.warning("Session cookies are not marked Secure in production")
