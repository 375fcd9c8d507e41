"""Session entity package: signed-in browser sessions."""

from .entity import UserSession
from .repository import UserSessionRepository
from .table import UserSessionTable

__all__ = ["UserSession", "UserSessionRepository", "UserSessionTable"]
