"""Command line interface for catalog-demo."""

import typer

from catalog_demo.api.utils.app_startup import configure_logging
from catalog_demo.runtime.context import get_config

from .db_commands import db_app

app = typer.Typer(
    help="catalog-demo: product catalogue demo application",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (default from config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the web application with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "catalog_demo.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,
    )


def main() -> None:
    """Main entry point for the CLI."""
    configure_logging()
    app()


if __name__ == "__main__":
    main()
