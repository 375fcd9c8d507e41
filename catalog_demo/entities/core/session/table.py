"""Session database table model."""

from datetime import datetime

from sqlmodel import Field

from catalog_demo.entities.core._base import EntityTable


class UserSessionTable(EntityTable, table=True):
    """Database persistence model for sessions."""

    __tablename__ = "session"

    token: str = Field(unique=True, index=True)
    user_id: str = Field(foreign_key="user.id", index=True)
    expires_at: datetime
    ip_address: str | None = None
    user_agent: str | None = None
