"""Product listing backed by the products table."""

from datetime import datetime

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from catalog_demo.entities.core._base import utc_now
from catalog_demo.entities.service.product import (
    Product,
    ProductPage,
    ProductQuery,
    ProductRepository,
    StockStatus,
)

_SAMPLE_ROWS = [
    (1, "Wireless Headphones", "Audio", 299.99, 45, StockStatus.IN_STOCK),
    (2, "Smart Watch", "Wearables", 399.99, 9, StockStatus.LOW_STOCK),
    (3, "Laptop Stand", "Accessories", 79.99, 0, StockStatus.OUT_OF_STOCK),
    (4, "Mechanical Keyboard", "Peripherals", 149.99, 67, StockStatus.IN_STOCK),
    (5, "USB-C Hub", "Accessories", 59.99, 8, StockStatus.LOW_STOCK),
    (6, "Wireless Mouse", "Peripherals", 49.99, 120, StockStatus.IN_STOCK),
    (7, "4K Monitor", "Displays", 599.99, 23, StockStatus.IN_STOCK),
    (8, "Webcam HD", "Peripherals", 89.99, 5, StockStatus.LOW_STOCK),
]


def sample_products(now: datetime | None = None) -> list[Product]:
    """The fixed in-memory catalogue, stamped with the current server time."""
    checked = now or utc_now()
    return [
        Product(
            id=product_id,
            name=name,
            category=category,
            price=price,
            quantity=quantity,
            status=status,
            last_checked=checked,
        )
        for product_id, name, category, price, quantity, status in _SAMPLE_ROWS
    ]


class ProductService:
    def __init__(self, session: Session):
        self._repository = ProductRepository(session)

    def get_products(self, query: ProductQuery) -> ProductPage:
        """Run the count and page queries. Database errors are logged and re-raised."""
        try:
            page = self._repository.query(query)
        except SQLAlchemyError as e:
            logger.error("[CRUD-Filter] Database error: {}", e)
            raise

        logger.debug(
            "[CRUD-Filter] page={} search={!r} sort={} {} -> {} of {}",
            query.page,
            query.search,
            query.safe_column,
            query.safe_order,
            len(page.products),
            page.total_count,
        )
        return page

    def get_all_products(self) -> list[Product]:
        try:
            return self._repository.list_all()
        except SQLAlchemyError as e:
            logger.error("[CRUD] Database error: {}", e)
            raise

    def get_product(self, product_id: int) -> Product | None:
        return self._repository.get(product_id)
