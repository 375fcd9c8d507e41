"""Jinja2 rendering shared by every HTML route."""

from datetime import datetime
from pathlib import Path
from typing import Any
from urllib.parse import urlencode

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import HTMLResponse

TEMPLATE_DIR = Path(__file__).resolve().parents[2] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


def _format_datetime(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d %H:%M:%S")


def _format_price(value: float) -> str:
    return f"{value:,.2f}"


templates.env.filters["datetime"] = _format_datetime
templates.env.filters["price"] = _format_price
templates.env.globals["urlencode"] = urlencode


def render(
    request: Request,
    name: str,
    status_code: int = 200,
    **context: Any,
) -> HTMLResponse:
    """Render ``name`` with the signed-in session (if any) available as ``auth``."""
    context.setdefault("auth", getattr(request.state, "auth_session", None))
    return templates.TemplateResponse(
        request, name, context, status_code=status_code
    )


def render_fragment(name: str, **context: Any) -> str:
    """Render a template to a string, outside any request."""
    return templates.env.get_template(name).render(**context)
