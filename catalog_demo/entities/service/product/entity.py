"""Entity: Product."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class StockStatus(str, Enum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    def quantity_is_consistent(self, quantity: int) -> bool:
        """Whether ``quantity`` fits this status under the generation rules."""
        if quantity < 0:
            return False
        if self is StockStatus.OUT_OF_STOCK:
            return quantity == 0
        if self is StockStatus.LOW_STOCK:
            return quantity < 10
        return quantity < 150


class Product(BaseModel):
    """A row of the products table.

    Identifiers are database serials but travel as strings, and ``last_checked``
    is exposed as ``lastChecked`` in ISO-8601 form.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(default=None, description="Serial primary key")
    name: str = Field(max_length=255)
    category: str = Field(max_length=100)
    price: float = Field(ge=0)
    status: StockStatus
    quantity: int = Field(ge=0)
    last_checked: datetime = Field(alias="lastChecked")

    @field_validator("price", mode="before")
    @classmethod
    def _price_from_decimal(cls, value: Any) -> Any:
        if isinstance(value, Decimal):
            return float(value)
        return value

    @field_serializer("id")
    def _serialize_id(self, value: int | None) -> str | None:
        return None if value is None else str(value)

    @field_serializer("last_checked")
    def _serialize_last_checked(self, value: datetime) -> str:
        return value.isoformat()

    @classmethod
    def from_row(cls, row: Any) -> "Product":
        """Build a product from a mapping-like result row or a table model."""
        if hasattr(row, "_mapping"):
            return cls.model_validate(dict(row._mapping))
        return cls.model_validate(row, from_attributes=True)
