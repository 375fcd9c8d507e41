"""Database CLI commands: create tables, seed products, inspect."""

import typer
from rich.progress import BarColumn, Progress, TextColumn
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from catalog_demo.core.services import DbManageService, generate_products, inspect_database
from catalog_demo.entities import ProductRepository

from .utils import console, get_database_service

db_app = typer.Typer(help="Database management commands")


@db_app.command("init")
def init_db() -> None:
    """Create all tables."""
    database_service = get_database_service()
    try:
        DbManageService(database_service.engine).create_all()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to create tables: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    console.print("[green]✅ Tables created[/green]")


@db_app.command("seed-products")
def seed_products(
    count: int = typer.Option(208, "--count", "-n", min=1, help="Number of products to generate"),
    batch_size: int = typer.Option(5000, "--batch-size", "-b", min=1, help="Rows per INSERT"),
    seed: int | None = typer.Option(None, "--seed", help="Random seed for reproducible prices and quantities"),
) -> None:
    """Drop and recreate the products table, then fill it with generated rows."""
    database_service = get_database_service()

    try:
        console.print("Dropping and recreating the products table...")
        DbManageService(database_service.engine).recreate_products()

        inserted = 0
        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}"),
            console=console,
        ) as progress:
            task = progress.add_task("Inserting products", total=count)
            for batch in generate_products(count, batch_size=batch_size, seed=seed):
                with database_service.session_scope() as session:
                    inserted += ProductRepository(session).create_many(batch)
                progress.update(task, completed=inserted)

        with database_service.session_scope() as session:
            repository = ProductRepository(session)
            total = repository.count()
            sample = repository.list_all(limit=5)
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Seed failed: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    console.print(f"[green]✅ Inserted {inserted} products[/green]")
    console.print(f"Total products in database: {total}")

    table = Table(title="Sample products")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Price", justify="right")
    table.add_column("Status", style="yellow")
    table.add_column("Quantity", justify="right")
    for product in sample:
        table.add_row(
            str(product.id),
            product.name,
            product.category,
            f"{product.price:.2f}",
            product.status.value,
            str(product.quantity),
        )
    console.print(table)


@db_app.command("check")
def check_db() -> None:
    """List the tables and registered users."""
    database_service = get_database_service()
    try:
        with database_service.session_scope() as session:
            report = inspect_database(session)
    finally:
        database_service.dispose()

    if not report.connected:
        console.print(f"[red]❌ Database error: {report.error}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]Tables:[/green] {', '.join(report.tables) or '(none)'}")

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    for user_id, name in report.users:
        table.add_row(user_id, name)
    console.print(table)
