"""Entities module with hybrid entity-centric structure.

This module organizes entities by business concept rather than technical layer.
Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .core.account import Account, AccountRepository, AccountTable
from .core.session import UserSession, UserSessionRepository, UserSessionTable
from .core.user import User, UserRepository, UserTable
from .service.product import Product, ProductRepository, ProductTable, StockStatus

__all__ = [
    "Account",
    "AccountRepository",
    "AccountTable",
    "Product",
    "ProductRepository",
    "ProductTable",
    "StockStatus",
    "User",
    "UserRepository",
    "UserSession",
    "UserSessionRepository",
    "UserSessionTable",
    "UserTable",
]
