"""Account entity package: credentials linked to a user."""

from .entity import CREDENTIAL_PROVIDER, Account
from .repository import AccountRepository
from .table import AccountTable

__all__ = ["Account", "AccountRepository", "AccountTable", "CREDENTIAL_PROVIDER"]
