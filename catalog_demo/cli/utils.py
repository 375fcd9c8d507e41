"""Shared utilities for CLI commands."""

import typer
from rich.console import Console

from catalog_demo.core.services import DbSessionService
from catalog_demo.core.services.database.db_session import build_engine
from catalog_demo.runtime.config.config_data import DatabaseConfigError
from catalog_demo.runtime.context import get_config

console = Console()


def get_database_service() -> DbSessionService:
    """Build the database service, exiting with a readable message when misconfigured."""
    try:
        engine = build_engine(get_config())
    except DatabaseConfigError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e
    return DbSessionService(engine)
