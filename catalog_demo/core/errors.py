"""Exceptions raised by the core services."""


class AuthError(Exception):
    """Base class for authentication failures."""


class UserAlreadyExistsError(AuthError):
    """Sign-up with an email that is already registered."""


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password."""
