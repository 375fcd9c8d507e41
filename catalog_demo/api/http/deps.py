"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from catalog_demo.api.http.app_data import ApplicationDependencies
from catalog_demo.api.http.errors import LoginRequired
from catalog_demo.core.models import AuthSession
from catalog_demo.core.services import (
    AuthService,
    DbSessionService,
    PlaceholderClient,
    ProductService,
)
from catalog_demo.runtime.config.config_data import DatabaseConfigError
from catalog_demo.runtime.context import get_config


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    return get_app_dependencies(request).database_service


def get_db_session(request: Request) -> Iterator[Session]:
    """Open a session for the duration of the request."""
    session = get_database_service(request).get_session()
    try:
        yield session
    finally:
        session.close()


def get_placeholder_client(request: Request) -> PlaceholderClient:
    """Get the JSON test API client."""
    return get_app_dependencies(request).placeholder_client


def get_auth_service(session: Session = Depends(get_db_session)) -> AuthService:
    return AuthService(session, get_config().auth)


def get_product_service(session: Session = Depends(get_db_session)) -> ProductService:
    return ProductService(session)


def get_session_token(request: Request) -> str | None:
    """The bare session token from a correctly signed cookie, else None."""
    auth_config = get_config().auth
    return AuthService.read_cookie(request.cookies, auth_config)


def get_optional_auth_session(request: Request) -> AuthSession | None:
    """Resolve the signed-in session, if any, and expose it to templates.

    The database is only touched when a validly signed cookie is present. A
    failed lookup is logged and treated as signed out so public pages keep
    rendering.
    """
    if hasattr(request.state, "auth_session"):
        return request.state.auth_session

    auth_session = None
    token = get_session_token(request)
    if token:
        try:
            with get_database_service(request).session_scope() as session:
                auth_session = AuthService(session, get_config().auth).get_session(token)
        except (SQLAlchemyError, DatabaseConfigError) as e:
            logger.error("Session lookup failed: {}", e)

    request.state.auth_session = auth_session
    return auth_session


def require_auth_session(
    request: Request,
    auth_session: AuthSession | None = Depends(get_optional_auth_session),
) -> AuthSession:
    """Redirect to the login page, with a callback to this page, when signed out."""
    if auth_session is None:
        raise LoginRequired(request.url.path)
    return auth_session
