from .db_check import DatabaseReport, inspect_database
from .db_manage import DbManageService
from .db_session import DbSessionService

__all__ = ["DatabaseReport", "DbManageService", "DbSessionService", "inspect_database"]
