"""Security utilities for the email/password session flow."""

import base64
import hashlib
import hmac
import secrets
from urllib.parse import urlparse

import bcrypt
from fastapi import Request

# bcrypt only looks at the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


def generate_secure_token(length: int = 32) -> str:
    """Generate a cryptographically secure random token.

    Args:
        length: Number of random bytes to generate (default 32)

    Returns:
        URL-safe base64 encoded token
    """
    return (
        base64.urlsafe_b64encode(secrets.token_bytes(length))
        .decode("utf-8")
        .rstrip("=")
    )


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    password_bytes = password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str | None) -> bool:
    """Check a password against a stored bcrypt hash."""
    if not hashed_password:
        return False
    password_bytes = password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(password_bytes, hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed hash in storage
        return False


def _signature(value: str, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), value.encode("utf-8"), hashlib.sha256).digest()
    return base64.urlsafe_b64encode(digest).decode("utf-8").rstrip("=")


def sign_value(value: str, secret: str) -> str:
    """Append an HMAC-SHA256 signature: ``<value>.<signature>``."""
    return f"{value}.{_signature(value, secret)}"


def unsign_value(signed: str | None, secret: str) -> str | None:
    """Return the original value if the signature matches, otherwise None."""
    if not signed or "." not in signed:
        return None

    value, signature = signed.rsplit(".", 1)
    if not value:
        return None

    # Constant-time comparison
    if not hmac.compare_digest(_signature(value, secret), signature):
        return None
    return value


def sanitize_return_url(
    return_to: str | None, allowed_hosts: list[str] | None = None
) -> str:
    """Sanitize return URL to prevent open redirects.

    Args:
        return_to: User-provided return URL
        allowed_hosts: Optional list of allowed hosts for absolute URLs

    Returns:
        Sanitized return URL (relative path or allowed absolute URL)
    """
    if not return_to:
        return "/"

    return_to = return_to.strip()

    # Allow relative paths starting with /
    if return_to.startswith("/") and not return_to.startswith("//"):
        # No control characters or backslashes (some browsers treat \ as /)
        if all(ord(c) >= 32 for c in return_to) and "\\" not in return_to:
            return return_to

    # Check absolute URLs against allowlist
    if allowed_hosts and (
        return_to.startswith("http://") or return_to.startswith("https://")
    ):
        parsed = urlparse(return_to)
        if parsed.hostname in allowed_hosts:
            return return_to

    return "/"


def extract_client_ip(request: Request) -> str | None:
    """Best-effort client IP, preferring proxy headers."""
    for header in ("x-forwarded-for", "x-real-ip", "cf-connecting-ip"):
        value = request.headers.get(header)
        if value:
            # Take first IP if comma-separated list
            return value.split(",")[0].strip()

    if request.client:
        return request.client.host
    return None
