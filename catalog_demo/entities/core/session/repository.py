"""Data-access layer for sessions."""

from sqlalchemy import delete
from sqlmodel import Session, col, select

from catalog_demo.entities.core._base import utc_now
from catalog_demo.entities.core.session.entity import UserSession
from catalog_demo.entities.core.session.table import UserSessionTable


class UserSessionRepository:
    """Data-access layer for sessions."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_token(self, token: str) -> UserSession | None:
        statement = select(UserSessionTable).where(UserSessionTable.token == token)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return UserSession.model_validate(row, from_attributes=True)

    def create(self, user_session: UserSession) -> UserSession:
        row = UserSessionTable.model_validate(user_session.model_dump())
        self._session.add(row)
        self._session.flush()
        return UserSession.model_validate(row, from_attributes=True)

    def delete_by_token(self, token: str) -> bool:
        statement = select(UserSessionTable).where(UserSessionTable.token == token)
        row = self._session.exec(statement).first()
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def delete_expired(self) -> int:
        """Remove every session past its expiry. Returns the number removed."""
        statement = delete(UserSessionTable).where(
            col(UserSessionTable.expires_at) <= utc_now()
        )
        result = self._session.execute(statement)
        self._session.flush()
        return result.rowcount or 0
