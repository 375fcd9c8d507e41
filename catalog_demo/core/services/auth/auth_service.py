"""Email/password authentication backed by the user, account and session tables."""

from collections.abc import Mapping
from datetime import timedelta

from loguru import logger
from sqlmodel import Session
from starlette.responses import Response

from catalog_demo.core.errors import (
    AuthError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from catalog_demo.core.models import AuthResult, AuthSession
from catalog_demo.core.security import (
    generate_secure_token,
    hash_password,
    sign_value,
    unsign_value,
    verify_password,
)
from catalog_demo.entities import (
    Account,
    AccountRepository,
    User,
    UserRepository,
    UserSession,
    UserSessionRepository,
)
from catalog_demo.entities.core._base import utc_now
from catalog_demo.runtime.config.config_data import AuthConfig
from catalog_demo.runtime.context import get_config


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    """Sign-up, sign-in, session lookup and sign-out.

    Every write commits on success and rolls back before re-raising on failure.
    """

    def __init__(self, session: Session, config: AuthConfig | None = None) -> None:
        self._session = session
        self._config = config or get_config().auth
        self._users = UserRepository(session)
        self._accounts = AccountRepository(session)
        self._sessions = UserSessionRepository(session)

    @property
    def config(self) -> AuthConfig:
        return self._config

    def sign_up_email(
        self,
        name: str,
        email: str,
        password: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> AuthResult:
        """Register a user with a credential account and sign them in."""
        email = normalize_email(email)
        self._check_password_length(password)

        try:
            if self._users.get_by_email(email) is not None:
                raise UserAlreadyExistsError(f"User with email {email} already exists")

            user = self._users.create(User(name=name.strip(), email=email))
            self._accounts.create(
                Account(
                    user_id=user.id,
                    account_id=user.id,
                    password=hash_password(password),
                )
            )
            result = self._create_session(user, ip_address, user_agent)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        logger.info("Registered user {}", user.id)
        return result

    def sign_in_email(
        self,
        email: str,
        password: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> AuthResult:
        """Verify the credential and open a new session."""
        email = normalize_email(email)

        try:
            user = self._users.get_by_email(email)
            if user is None:
                raise InvalidCredentialsError("Invalid email or password")

            account = self._accounts.get_credential(user.id)
            if account is None or not verify_password(password, account.password):
                raise InvalidCredentialsError("Invalid email or password")

            result = self._create_session(user, ip_address, user_agent)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        logger.info("User {} signed in", user.id)
        return result

    def get_session(self, token: str | None) -> AuthSession | None:
        """Resolve a session token. Missing, unknown and expired tokens give None."""
        if not token:
            return None

        user_session = self._sessions.get_by_token(token)
        if user_session is None:
            return None

        if user_session.is_expired():
            logger.debug("Session {} expired", user_session.id)
            self._sessions.delete_by_token(token)
            self._session.commit()
            return None

        user = self._users.get(user_session.user_id)
        if user is None:
            return None
        return AuthSession.from_entities(user, user_session)

    def sign_out(self, token: str | None) -> None:
        """Delete the session. Unknown tokens are ignored."""
        if not token:
            return

        try:
            if self._sessions.delete_by_token(token):
                self._session.commit()
        except Exception:
            self._session.rollback()
            raise

    def purge_expired_sessions(self) -> int:
        removed = self._sessions.delete_expired()
        self._session.commit()
        if removed:
            logger.info("Removed {} expired sessions", removed)
        return removed

    # Session cookie

    def set_session_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(
            key=self._config.cookie_name,
            value=sign_value(token, self._config.secret),
            max_age=self._config.session_max_age,
            httponly=True,
            secure=self._config.secure_cookies,
            samesite="lax",
            path="/",
        )

    def clear_session_cookie(self, response: Response) -> None:
        response.delete_cookie(
            key=self._config.cookie_name,
            httponly=True,
            secure=self._config.secure_cookies,
            samesite="lax",
            path="/",
        )

    def read_session_cookie(self, cookies: Mapping[str, str]) -> str | None:
        return self.read_cookie(cookies, self._config)

    @staticmethod
    def read_cookie(cookies: Mapping[str, str], config: AuthConfig) -> str | None:
        """Return the bare session token when the cookie signature is valid."""
        return unsign_value(cookies.get(config.cookie_name), config.secret)

    def _check_password_length(self, password: str) -> None:
        if len(password) < self._config.min_password_length:
            raise AuthError("Password too short")
        if len(password) > self._config.max_password_length:
            raise AuthError("Password too long")

    def _create_session(
        self, user: User, ip_address: str | None, user_agent: str | None
    ) -> AuthResult:
        user_session = self._sessions.create(
            UserSession(
                token=generate_secure_token(),
                user_id=user.id,
                expires_at=utc_now() + timedelta(seconds=self._config.session_max_age),
                ip_address=ip_address,
                user_agent=user_agent,
            )
        )
        return AuthResult(
            token=user_session.token,
            auth_session=AuthSession.from_entities(user, user_session),
        )
