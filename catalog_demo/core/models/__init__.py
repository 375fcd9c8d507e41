from .auth import AuthResult, AuthSession, SessionInfo, SessionUser
from .state import ActionState, FieldErrors, FieldValues

__all__ = [
    "ActionState",
    "AuthResult",
    "AuthSession",
    "FieldErrors",
    "FieldValues",
    "SessionInfo",
    "SessionUser",
]
