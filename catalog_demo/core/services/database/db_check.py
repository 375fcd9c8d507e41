"""Connectivity report: the public tables and the registered users."""

from dataclasses import dataclass, field

from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

_TABLES_SQL = {
    "postgresql": "SELECT tablename FROM pg_catalog.pg_tables WHERE schemaname = 'public' ORDER BY tablename",
    "sqlite": "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%' ORDER BY name",
}


@dataclass
class DatabaseReport:
    tables: list[str] = field(default_factory=list)
    users: list[tuple[str, str]] = field(default_factory=list)
    error: str | None = None

    @property
    def connected(self) -> bool:
        return self.error is None


def inspect_database(session: Session) -> DatabaseReport:
    """List tables and users. Failures are reported on the result, not raised."""
    try:
        dialect = session.get_bind().dialect.name
        tables_sql = _TABLES_SQL.get(dialect, _TABLES_SQL["postgresql"])
        tables = [row[0] for row in session.execute(text(tables_sql))]
        logger.info("Tables: {}", tables)

        users: list[tuple[str, str]] = []
        if "user" in tables:
            users = [
                (str(row[0]), row[1])
                for row in session.execute(text('SELECT id, name FROM "user" ORDER BY created_at'))
            ]
        logger.info("Users: {}", len(users))
        return DatabaseReport(tables=tables, users=users)
    except SQLAlchemyError as e:
        logger.error("Database error: {}", e)
        return DatabaseReport(error=str(e))
