"""FastAPI application and request pipeline."""

import time
import uuid
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_demo.api.http.app_data import ApplicationDependencies
from catalog_demo.api.http.errors import register_exception_handlers, server_error_response
from catalog_demo.api.http.routers import (
    auth,
    auth_api,
    contact,
    dbtest,
    external,
    health,
    pages,
    products,
)
from catalog_demo.api.utils.app_startup import configure_logging
from catalog_demo.core.security import extract_client_ip
from catalog_demo.core.services import AuthService, DbSessionService, PlaceholderClient
from catalog_demo.runtime.config.config_data import DatabaseConfigError
from catalog_demo.runtime.config.settings import EnvironmentVariables
from catalog_demo.runtime.context import get_config

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"

# Requests for these are neither timed nor logged
_UNTIMED_PREFIXES = ("/static/", "/favicon.ico")

configure_logging()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


app = FastAPI(
    title="catalog-demo",
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None,
)

app.add_middleware(SecurityHeadersMiddleware)
register_exception_handlers(app)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

__all__ = ["app", "startup", "shutdown"]


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    path = request.url.path
    timed = not path.startswith(_UNTIMED_PREFIXES)

    context = {
        "request_id": request_id,
        "method": request.method,
        "path": path,
        "client_ip": extract_client_ip(request) or "unknown",
    }

    start = time.perf_counter()
    with logger.contextualize(**context):
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.bind(error_type=type(exc).__name__).exception("request.error")
            response = server_error_response(request, exc, request_id)

        duration_ms = round((time.perf_counter() - start) * 1000)
        if timed:
            logger.info(
                "{} - {} {} - {}ms",
                datetime.now(UTC).isoformat(timespec="milliseconds"),
                request.method,
                path,
                duration_ms,
            )
            response.headers["x-response-time"] = f"{duration_ms}ms"

        response.headers.setdefault("X-Request-ID", request_id)
        return response


app.include_router(health.router)
app.include_router(pages.router)
app.include_router(auth.router)
app.include_router(auth_api.router)
app.include_router(products.router)
app.include_router(contact.router)
app.include_router(external.router)
app.include_router(dbtest.router)


async def startup(app: FastAPI) -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    env = EnvironmentVariables()
    if not env.database_url and not env.has_postgres_settings:
        logger.warning(
            "PostgreSQL settings are incomplete ({}); database pages will fail until they are set",
            ", ".join(config.database.missing_settings) or "DATABASE_URL",
        )
    if not env.better_auth_secret:
        logger.warning("BETTER_AUTH_SECRET not set; session cookies use the development secret")

    # Tests install their own dependencies before the client starts
    if getattr(app.state, "app_dependencies", None) is None:
        app.state.app_dependencies = ApplicationDependencies(
            database_service=DbSessionService(),
            placeholder_client=PlaceholderClient.from_config(config.placeholder_api),
        )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is None:
        return

    database_service = app_dependencies.database_service
    try:
        with database_service.session_scope() as session:
            AuthService(session).purge_expired_sessions()
    except (SQLAlchemyError, DatabaseConfigError) as e:
        logger.warning("Skipping expired session cleanup: {}", e)
    database_service.dispose()


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(app, host=config.app.host, port=config.app.port, access_log=False)
