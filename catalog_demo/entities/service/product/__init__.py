"""Entity package: Product."""

from .entity import Product, StockStatus
from .query import SORT_COLUMNS, ProductPage, ProductQuery
from .repository import ProductRepository
from .table import ProductTable

__all__ = [
    "Product",
    "ProductPage",
    "ProductQuery",
    "ProductRepository",
    "ProductTable",
    "SORT_COLUMNS",
    "StockStatus",
]
