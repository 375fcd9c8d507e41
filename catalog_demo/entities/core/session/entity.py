"""Session domain entity."""

from datetime import datetime

from pydantic import Field

from catalog_demo.entities.core._base import Entity, as_utc, utc_now


class UserSession(Entity):
    """A signed-in session, looked up by its opaque cookie token."""

    token: str = Field(description="Opaque session token", repr=False)
    user_id: str = Field(description="Signed-in user")
    expires_at: datetime = Field(description="Absolute expiry")
    ip_address: str | None = Field(default=None)
    user_agent: str | None = Field(default=None)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if session is expired."""
        return as_utc(self.expires_at) <= (now or utc_now())
