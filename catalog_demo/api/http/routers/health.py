"""Liveness and readiness probes."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from catalog_demo.api.http.deps import get_database_service
from catalog_demo.core.services import DbSessionService
from catalog_demo.runtime.config.config_data import DatabaseConfigError

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: 200 while the process is running."""
    return {"status": "healthy"}


@router.get("/ready", response_model=None)
def readiness(
    database_service: DbSessionService = Depends(get_database_service),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    try:
        healthy = database_service.health_check()
        database: dict[str, Any] = {
            "status": "healthy" if healthy else "unhealthy",
            "type": database_service.dialect,
        }
    except DatabaseConfigError as e:
        healthy = False
        database = {"status": "unhealthy", "error": str(e)}

    body = {"status": "ready" if healthy else "not_ready", "checks": {"database": database}}
    if not healthy:
        return JSONResponse(status_code=503, content=body)
    return body
