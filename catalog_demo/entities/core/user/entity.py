"""User domain entity."""

from typing import Any

from pydantic import Field

from catalog_demo.entities.core._base import Entity


class User(Entity):
    """A registered account holder.

    Only ``id``, ``email``, ``name`` and ``email_verified`` are read by the pages.
    """

    name: str = Field(description="Display name")
    email: str = Field(description="Normalised (lower-cased) email address")
    email_verified: bool = Field(default=False, description="Email verification status")
    image: str | None = Field(default=None, description="Avatar URL")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.email == other.email
            and self.email_verified == other.email_verified
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.email, self.email_verified))
