"""Exception handlers: HTML pages for browsers, JSON for ``/api`` routes."""

from urllib.parse import quote

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse, RedirectResponse, Response

from catalog_demo.api.http.templating import render


class LoginRequired(Exception):
    """Raised by protected routes when no valid session is present."""

    def __init__(self, callback_url: str):
        super().__init__(callback_url)
        self.callback_url = callback_url

    @property
    def login_url(self) -> str:
        return f"/login?callbackUrl={quote(self.callback_url, safe='/')}"


def wants_json(request: Request) -> bool:
    return request.url.path.startswith("/api/")


async def login_required_handler(request: Request, exc: LoginRequired) -> Response:
    logger.info("Unauthenticated access to {}, redirecting to login", exc.callback_url)
    return RedirectResponse(exc.login_url, status_code=303)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    if wants_json(request):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=exc.headers,
        )

    if exc.status_code == 404:
        return render(request, "not_found.html", status_code=404)
    return render(
        request,
        "error.html",
        status_code=exc.status_code,
        message=str(exc.detail),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    if wants_json(request):
        return JSONResponse(status_code=422, content={"detail": exc.errors()})
    return render(
        request,
        "error.html",
        status_code=422,
        message="The request could not be processed. Please check the submitted values.",
    )


def server_error_response(request: Request, exc: Exception, request_id: str) -> Response:
    """The generic error boundary for anything a route let escape."""
    if wants_json(request):
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal Server Error", "request_id": request_id},
        )
    return render(
        request,
        "error.html",
        status_code=500,
        message="Something went wrong. Please try again later.",
        request_id=request_id,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LoginRequired, login_required_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
