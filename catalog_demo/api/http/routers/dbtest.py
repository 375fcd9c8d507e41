"""Database connectivity page."""

from fastapi import APIRouter, Depends, Request
from loguru import logger
from starlette.responses import HTMLResponse

from catalog_demo.api.http.deps import get_database_service, get_optional_auth_session
from catalog_demo.api.http.templating import render
from catalog_demo.core.services import DatabaseReport, DbSessionService, inspect_database
from catalog_demo.runtime.config.config_data import DatabaseConfigError

router = APIRouter(tags=["dbtest"], dependencies=[Depends(get_optional_auth_session)])


@router.get("/dbtest", response_class=HTMLResponse)
def dbtest_page(
    request: Request,
    database_service: DbSessionService = Depends(get_database_service),
):
    try:
        session = database_service.get_session()
    except DatabaseConfigError as e:
        logger.error("Database error: {}", e)
        report = DatabaseReport(error=str(e))
    else:
        with session:
            report = inspect_database(session)

    return render(request, "dbtest.html", report=report)
