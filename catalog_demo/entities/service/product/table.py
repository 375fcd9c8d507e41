"""Product database table model."""

from datetime import datetime
from decimal import Decimal

from sqlmodel import Field, SQLModel


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    A single flat table: no foreign keys and no audit columns beyond ``last_checked``.
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    category: str = Field(max_length=100)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    status: str = Field(max_length=20)
    quantity: int
    last_checked: datetime
