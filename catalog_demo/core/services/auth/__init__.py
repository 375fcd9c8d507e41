from .actions import (
    SIGN_IN_FAILED,
    SIGN_IN_SUCCESS,
    SIGN_OUT_FAILED,
    SIGN_OUT_SUCCESS,
    SIGN_UP_FAILED,
    SIGN_UP_SUCCESS,
    ActionResult,
    sign_in_action,
    sign_out_action,
    sign_up_action,
    validate_sign_in,
    validate_sign_up,
)
from .auth_service import AuthService, normalize_email

__all__ = [
    "SIGN_IN_FAILED",
    "SIGN_IN_SUCCESS",
    "SIGN_OUT_FAILED",
    "SIGN_OUT_SUCCESS",
    "SIGN_UP_FAILED",
    "SIGN_UP_SUCCESS",
    "ActionResult",
    "AuthService",
    "normalize_email",
    "sign_in_action",
    "sign_out_action",
    "sign_up_action",
    "validate_sign_in",
    "validate_sign_up",
]
