"""Account database table model."""

from sqlmodel import Field

from catalog_demo.entities.core._base import EntityTable


class AccountTable(EntityTable, table=True):
    """Database persistence model for accounts."""

    __tablename__ = "account"

    user_id: str = Field(foreign_key="user.id", index=True)
    account_id: str
    provider_id: str = Field(max_length=50)
    password: str | None = None
