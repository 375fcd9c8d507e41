"""Data-access layer for accounts."""

from sqlmodel import Session, select

from catalog_demo.entities.core.account.entity import CREDENTIAL_PROVIDER, Account
from catalog_demo.entities.core.account.table import AccountTable


class AccountRepository:
    """Data-access layer for accounts."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_credential(self, user_id: str) -> Account | None:
        statement = select(AccountTable).where(
            (AccountTable.user_id == user_id)
            & (AccountTable.provider_id == CREDENTIAL_PROVIDER)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Account.model_validate(row, from_attributes=True)

    def create(self, account: Account) -> Account:
        row = AccountTable.model_validate(account.model_dump())
        self._session.add(row)
        self._session.flush()
        return Account.model_validate(row, from_attributes=True)
