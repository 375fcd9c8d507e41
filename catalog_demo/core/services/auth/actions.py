"""Form actions for sign-up, sign-in and sign-out.

Each action validates the submitted fields, delegates to ``AuthService`` and
returns an ``ActionResult``. Callers decide whether to redirect, re-render the
form or return the state as JSON.
"""

from dataclasses import dataclass

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from catalog_demo.core.errors import AuthError
from catalog_demo.core.models import ActionState, AuthResult
from catalog_demo.core.services.auth.auth_service import AuthService

SIGN_UP_SUCCESS = "Account created and signed in successfully! Welcome to Better Auth."
SIGN_IN_SUCCESS = "Welcome back! You're now signed in."
SIGN_OUT_SUCCESS = "You have been signed out successfully."
SIGN_UP_FAILED = "Sign up failed. This email may already be registered."
SIGN_IN_FAILED = "Sign in failed. Please check your email and password."
SIGN_OUT_FAILED = "Sign out failed. Please try again."


@dataclass
class ActionResult:
    state: ActionState
    auth: AuthResult | None = None

    @property
    def success(self) -> bool:
        return self.state.success


def _check_email(email: str | None) -> ActionState | None:
    if not email or "@" not in email:
        return ActionState.fail(
            "Please enter a valid email address.",
            errors={"email": "Invalid email address"},
        )
    return None


def _check_password(password: str | None) -> ActionState | None:
    if not password or len(password) < 8:
        return ActionState.fail(
            "Password must be at least 8 characters long.",
            errors={"password": "Password must be at least 8 characters"},
        )
    return None


def validate_sign_up(
    name: str | None, email: str | None, password: str | None
) -> ActionState | None:
    """Return the first failing rule as a state, or None when the form is valid."""
    values = {"name": name or "", "email": email or ""}

    if not name or len(name) < 2:
        return ActionState.fail(
            "Please enter a valid name (at least 2 characters).",
            errors={"name": "Name must be at least 2 characters"},
            values=values,
        )

    failure = _check_email(email) or _check_password(password)
    if failure is not None:
        return failure.model_copy(update={"values": values})
    return None


def validate_sign_in(email: str | None, password: str | None) -> ActionState | None:
    return _check_email(email) or _check_password(password)


def sign_up_action(
    service: AuthService,
    name: str | None,
    email: str | None,
    password: str | None,
    ip_address: str | None = None,
    user_agent: str | None = None,
) -> ActionResult:
    logger.info("[signUpAction] Starting sign up process")
    logger.info("[signUpAction] Validating input for email: {}", email)

    invalid = validate_sign_up(name, email, password)
    if invalid is not None:
        return ActionResult(state=invalid)

    try:
        logger.info("[signUpAction] Creating user with email and password")
        result = service.sign_up_email(name, email, password, ip_address, user_agent)
    except (AuthError, SQLAlchemyError) as e:
        logger.error("[signUpAction] Sign up error: {}", e)
        return ActionResult(
            state=ActionState.fail(
                SIGN_UP_FAILED, values={"name": name or "", "email": email or ""}
            )
        )

    logger.info("[signUpAction] Sign up successful for: {}", email)
    return ActionResult(state=ActionState.ok(SIGN_UP_SUCCESS), auth=result)


def sign_in_action(
    service: AuthService,
    email: str | None,
    password: str | None,
    ip_address: str | None = None,
    user_agent: str | None = None,
) -> ActionResult:
    logger.info("[signInAction] Starting sign in process")
    logger.info("[signInAction] Sign in attempt for email: {}", email)

    invalid = validate_sign_in(email, password)
    if invalid is not None:
        return ActionResult(state=invalid)

    try:
        result = service.sign_in_email(email, password, ip_address, user_agent)
    except (AuthError, SQLAlchemyError) as e:
        logger.error("[signInAction] Sign in error: {}", e)
        return ActionResult(state=ActionState.fail(SIGN_IN_FAILED))

    logger.info("[signInAction] Sign in successful for: {}", email)
    return ActionResult(state=ActionState.ok(SIGN_IN_SUCCESS), auth=result)


def sign_out_action(service: AuthService, token: str | None) -> ActionResult:
    logger.info("[signOutAction] Starting sign out process")

    try:
        service.sign_out(token)
    except SQLAlchemyError as e:
        logger.error("[signOutAction] Sign out error: {}", e)
        return ActionResult(state=ActionState.fail(SIGN_OUT_FAILED))

    logger.info("[signOutAction] Sign out successful")
    return ActionResult(state=ActionState.ok(SIGN_OUT_SUCCESS))
