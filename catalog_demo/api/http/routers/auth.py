"""Browser-facing auth pages: forms that redirect on success."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Query, Request
from loguru import logger
from starlette.responses import HTMLResponse, RedirectResponse

from catalog_demo.api.http.deps import (
    get_auth_service,
    get_optional_auth_session,
    get_session_token,
    require_auth_session,
)
from catalog_demo.api.http.templating import render
from catalog_demo.core.models import AuthSession
from catalog_demo.core.security import extract_client_ip, sanitize_return_url
from catalog_demo.core.services.auth import (
    AuthService,
    sign_in_action,
    sign_out_action,
    sign_up_action,
)

router = APIRouter(tags=["auth"], dependencies=[Depends(get_optional_auth_session)])

FLAG_MESSAGES = {
    ("success", "signin"): "Signed in successfully.",
    ("success", "signup"): "Account created and signed in successfully.",
    ("error", "signin"): "Sign in failed. Please check your email and password.",
    ("error", "signup"): "Sign up failed. This email may already be registered.",
}


def _client(request: Request) -> tuple[str | None, str | None]:
    return extract_client_ip(request), request.headers.get("user-agent")


@router.get("/register", response_class=HTMLResponse)
def register_page(request: Request):
    return render(request, "register.html", state=None)


@router.post("/register", response_class=HTMLResponse)
def register(
    request: Request,
    name: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    service: AuthService = Depends(get_auth_service),
):
    result = sign_up_action(service, name, email, password, *_client(request))
    if not result.success:
        return render(request, "register.html", state=result.state)

    logger.info("[signUpAction] Redirecting to login page")
    response = RedirectResponse("/login?registered=true", status_code=303)
    service.set_session_cookie(response, result.auth.token)
    return response


@router.get("/login", response_class=HTMLResponse)
def login_page(
    request: Request,
    registered: bool = False,
    callback_url: Annotated[str | None, Query(alias="callbackUrl")] = None,
):
    return render(
        request,
        "login.html",
        state=None,
        registered=registered,
        callback_url=callback_url or "",
        email="",
    )


@router.post("/login", response_class=HTMLResponse)
def login(
    request: Request,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    callback_url: Annotated[str, Form(alias="callbackUrl")] = "",
    service: AuthService = Depends(get_auth_service),
):
    if callback_url:
        logger.info("[signInAction] Callback URL provided: {}", callback_url)

    result = sign_in_action(service, email, password, *_client(request))
    if not result.success:
        return render(
            request,
            "login.html",
            state=result.state,
            registered=False,
            callback_url=callback_url,
            email=email,
        )

    redirect_url = sanitize_return_url(callback_url)
    logger.info("[signInAction] Redirecting to: {}", redirect_url)
    response = RedirectResponse(redirect_url, status_code=303)
    service.set_session_cookie(response, result.auth.token)
    return response


@router.post("/logout")
def logout(
    token: str | None = Depends(get_session_token),
    service: AuthService = Depends(get_auth_service),
):
    # Failures are logged by the action; the user is signed out of this browser either way
    sign_out_action(service, token)

    logger.info("[signOutAction] Redirecting to login page")
    response = RedirectResponse("/login", status_code=303)
    service.clear_session_cookie(response)
    return response


@router.get("/protectedpage", response_class=HTMLResponse)
def protected_page(
    request: Request,
    logged_in: Annotated[bool, Query(alias="loggedIn")] = False,
    auth_session: AuthSession = Depends(require_auth_session),
):
    logger.info(
        "[ProtectedPage] Session found - user: {} userId: {}",
        auth_session.user.email,
        auth_session.user.id,
    )
    return render(request, "protectedpage.html", logged_in=logged_in)


@router.get("/auth/flags", response_class=HTMLResponse)
def flags_page(
    request: Request,
    success: str | None = None,
    error: str | None = None,
):
    notice = None
    if success:
        notice = ("success", FLAG_MESSAGES.get(("success", success)))
    elif error:
        notice = ("error", FLAG_MESSAGES.get(("error", error)))
    return render(request, "auth_flags.html", notice=notice)


@router.post("/auth/flags/sign-in")
def flags_sign_in(
    request: Request,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    service: AuthService = Depends(get_auth_service),
):
    result = sign_in_action(service, email, password, *_client(request))
    if not result.success:
        return RedirectResponse("/auth/flags?error=signin", status_code=303)

    response = RedirectResponse("/auth/flags?success=signin", status_code=303)
    service.set_session_cookie(response, result.auth.token)
    return response


@router.post("/auth/flags/sign-up")
def flags_sign_up(
    request: Request,
    name: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    service: AuthService = Depends(get_auth_service),
):
    result = sign_up_action(service, name, email, password, *_client(request))
    if not result.success:
        return RedirectResponse("/auth/flags?error=signup", status_code=303)

    response = RedirectResponse("/auth/flags?success=signup", status_code=303)
    service.set_session_cookie(response, result.auth.token)
    return response
