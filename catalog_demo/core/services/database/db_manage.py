"""Schema management: create the tables, drop the products table."""

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel

from catalog_demo.entities import AccountTable, ProductTable, UserSessionTable, UserTable


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        SQLModel.metadata.create_all(
            self._engine,
            tables=[
                UserTable.__table__,
                AccountTable.__table__,
                UserSessionTable.__table__,
                ProductTable.__table__,
            ],
        )
        logger.info("Database initialized with tables.")

    def recreate_products(self) -> None:
        """Drop and recreate the products table."""
        table = ProductTable.__table__
        table.drop(self._engine, checkfirst=True)
        table.create(self._engine)
        logger.info("Products table recreated")
