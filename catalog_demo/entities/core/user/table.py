"""User database table model."""

from sqlmodel import Field

from catalog_demo.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    __tablename__ = "user"

    name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)
    email_verified: bool = Field(default=False)
    image: str | None = None
