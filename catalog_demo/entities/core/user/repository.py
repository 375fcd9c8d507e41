"""Data-access layer for users."""

from sqlmodel import Session, select

from catalog_demo.entities.core._base import utc_now
from catalog_demo.entities.core.user.entity import User
from catalog_demo.entities.core.user.table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: str) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_by_email(self, email: str) -> User | None:
        statement = select(UserTable).where(UserTable.email == email)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def list_all(self) -> list[User]:
        rows = self._session.exec(select(UserTable).order_by(UserTable.created_at)).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def create(self, user: User) -> User:
        row = UserTable.model_validate(user.model_dump())
        self._session.add(row)
        self._session.flush()
        return User.model_validate(row, from_attributes=True)

    def update(self, user: User) -> User:
        row = self._session.get(UserTable, user.id)
        if row is None:
            raise ValueError(f"User {user.id} not found")

        row.name = user.name
        row.email = user.email
        row.email_verified = user.email_verified
        row.image = user.image
        row.updated_at = utc_now()
        self._session.add(row)
        self._session.flush()
        return User.model_validate(row, from_attributes=True)
