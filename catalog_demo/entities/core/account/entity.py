"""Account domain entity."""

from pydantic import Field

from catalog_demo.entities.core._base import Entity

CREDENTIAL_PROVIDER = "credential"


class Account(Entity):
    """A sign-in method for a user. Email/password accounts use the ``credential`` provider."""

    user_id: str = Field(description="Owning user")
    account_id: str = Field(description="Provider-side identifier (the user id for credentials)")
    provider_id: str = Field(default=CREDENTIAL_PROVIDER)
    password: str | None = Field(default=None, description="bcrypt hash", repr=False)
