"""Contact form in three styles: inline state, redirect, and JSON."""

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, Form, Request
from pydantic import BaseModel
from starlette.responses import HTMLResponse, RedirectResponse

from catalog_demo.api.http.deps import get_optional_auth_session
from catalog_demo.api.http.templating import render
from catalog_demo.core.services import ContactResult, submit_contact

router = APIRouter(tags=["contact"])


class ContactPayload(BaseModel):
    name: str = ""
    email: str = ""
    message: str = ""


@router.get(
    "/contact",
    response_class=HTMLResponse,
    dependencies=[Depends(get_optional_auth_session)],
)
def contact_page(request: Request, error: str | None = None):
    return render(request, "contact.html", result=None, values={}, redirect_error=error)


@router.post(
    "/contact",
    response_class=HTMLResponse,
    dependencies=[Depends(get_optional_auth_session)],
)
def contact_submit(
    request: Request,
    name: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    message: Annotated[str, Form()] = "",
):
    values = {"name": name, "email": email, "message": message}
    result = submit_contact(values)
    return render(
        request,
        "contact.html",
        result=result,
        # Clear the form once it has been accepted
        values={} if result.success else values,
        redirect_error=None,
    )


@router.post("/contact/redirect")
def contact_submit_redirect(
    name: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    message: Annotated[str, Form()] = "",
):
    result = submit_contact({"name": name, "email": email, "message": message})
    if not result.success:
        return RedirectResponse(f"/contact?error={quote(result.message)}", status_code=303)
    return RedirectResponse("/contact/thank-you", status_code=303)


@router.get(
    "/contact/thank-you",
    response_class=HTMLResponse,
    dependencies=[Depends(get_optional_auth_session)],
)
def contact_thank_you(request: Request):
    return render(request, "thank_you.html")


@router.post("/api/contact", response_model=ContactResult, response_model_exclude_none=True)
def api_contact(payload: ContactPayload) -> ContactResult:
    return submit_contact(payload.model_dump())
