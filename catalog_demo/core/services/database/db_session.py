"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import Engine, text
from sqlmodel import Session, create_engine

from catalog_demo.runtime.config.config_data import ConfigData
from catalog_demo.runtime.context import get_config


def build_engine(config: ConfigData) -> Engine:
    """Create the shared connection pool for the configured database."""
    db_config = config.database
    connection_string = db_config.connection_string

    engine_kwargs: dict = {
        "echo": False,
        "connect_args": _get_connect_args(config, connection_string),
    }

    if db_config.is_postgres:
        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,  # Validate connections before use
            }
        )

    logger.info(
        "Initializing database engine for environment {} ({})",
        config.app.environment,
        connection_string.split("://", 1)[0],
    )
    return create_engine(connection_string, **engine_kwargs)


def _get_connect_args(config: ConfigData, connection_string: str) -> dict:
    """Get database-specific connection arguments."""
    connect_args = {}

    if config.database.is_postgres:
        connect_args.update(
            {
                # Application name for connection tracking
                "application_name": f"catalog_demo_{config.app.environment}",
                "connect_timeout": 30,
            }
        )

    elif connection_string.startswith("sqlite"):
        connect_args.update({"check_same_thread": False})

        if config.app.environment == "production":
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )

    return connect_args


class DbSessionService:
    def __init__(self, engine: Engine | None = None):
        """Wrap the given engine, or build the shared one from config on first use."""
        self._engine = engine

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = build_engine(get_config())
        return self._engine

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self.engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Commit on success, roll back and re-raise on error, always close."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self.engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
