"""State-returning auth endpoints: the outcome comes back as JSON."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, Response

from catalog_demo.api.http.deps import (
    get_auth_service,
    get_optional_auth_session,
    get_session_token,
)
from catalog_demo.core.models import ActionState, AuthSession
from catalog_demo.core.security import extract_client_ip
from catalog_demo.core.services.auth import (
    AuthService,
    sign_in_action,
    sign_out_action,
    sign_up_action,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/sign-up", response_model=ActionState, response_model_exclude_none=True)
def sign_up(
    request: Request,
    response: Response,
    name: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    service: AuthService = Depends(get_auth_service),
):
    result = sign_up_action(
        service,
        name,
        email,
        password,
        extract_client_ip(request),
        request.headers.get("user-agent"),
    )
    if result.auth is not None:
        service.set_session_cookie(response, result.auth.token)
    return result.state


@router.post("/sign-in", response_model=ActionState, response_model_exclude_none=True)
def sign_in(
    request: Request,
    response: Response,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    service: AuthService = Depends(get_auth_service),
):
    result = sign_in_action(
        service,
        email,
        password,
        extract_client_ip(request),
        request.headers.get("user-agent"),
    )
    if result.auth is not None:
        service.set_session_cookie(response, result.auth.token)
    return result.state


@router.post("/sign-out", response_model=ActionState, response_model_exclude_none=True)
def sign_out(
    response: Response,
    token: str | None = Depends(get_session_token),
    service: AuthService = Depends(get_auth_service),
):
    result = sign_out_action(service, token)
    if result.success:
        service.clear_session_cookie(response)
    return result.state


@router.get("/session", response_model=AuthSession | None)
def current_session(
    auth_session: AuthSession | None = Depends(get_optional_auth_session),
):
    return auth_session
