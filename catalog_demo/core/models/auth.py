"""Session views handed to pages and API clients."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from catalog_demo.entities import User, UserSession


class SessionUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    id: str
    email: str
    name: str
    email_verified: bool = Field(default=False, alias="emailVerified")


class SessionInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    id: str
    expires_at: datetime = Field(alias="expiresAt")


class AuthSession(BaseModel):
    """The signed-in user and the session they are using."""

    user: SessionUser
    session: SessionInfo

    @classmethod
    def from_entities(cls, user: User, user_session: UserSession) -> "AuthSession":
        return cls(
            user=SessionUser(
                id=user.id,
                email=user.email,
                name=user.name,
                email_verified=user.email_verified,
            ),
            session=SessionInfo(id=user_session.id, expires_at=user_session.expires_at),
        )


class AuthResult(BaseModel):
    """Outcome of a successful sign-up or sign-in: the new cookie token and session."""

    token: str = Field(repr=False)
    auth_session: AuthSession
