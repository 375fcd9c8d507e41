"""Static pages, rendered once and then served from memory."""

from fastapi import APIRouter, Depends, Request
from loguru import logger
from starlette.responses import HTMLResponse

from catalog_demo.api.http.deps import get_app_dependencies, get_optional_auth_session
from catalog_demo.api.http.templating import render, render_fragment
from catalog_demo.entities.core._base import utc_now

router = APIRouter(tags=["pages"], dependencies=[Depends(get_optional_auth_session)])

DEMO_LINKS = [
    ("/products", "Products", "Paginated, searchable and sortable product table"),
    ("/products/sample", "Sample products", "In-memory products with a preview-only edit form"),
    ("/products/all", "All products", "Every stored product in one unpaginated table"),
    ("/register", "Register", "Create an account (redirects to sign in)"),
    ("/login", "Sign in", "Email and password sign-in with a callback URL"),
    ("/protectedpage", "Protected page", "Only visible with a session"),
    ("/auth/flags", "Auth with query flags", "Sign in and sign up reporting through ?success and ?error"),
    ("/contact", "Contact form", "Server-side validation with inline errors or a redirect"),
    ("/posts", "Posts", "First posts from a public JSON API"),
    ("/users", "Users", "Users from a public JSON API"),
    ("/dbtest", "Database check", "Tables and registered users"),
    ("/about", "About", "A statically rendered page"),
]


def _cached_body(request: Request, name: str) -> str:
    cache = get_app_dependencies(request).static_pages
    if name not in cache:
        logger.info("Rendering static page {}", name)
        cache[name] = render_fragment(name, links=DEMO_LINKS, rendered_at=utc_now())
    return cache[name]


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    return render(
        request, "page.html", title="Home", body=_cached_body(request, "pages/index.html")
    )


@router.get("/about", response_class=HTMLResponse)
def about(request: Request):
    return render(
        request, "page.html", title="About", body=_cached_body(request, "pages/about.html")
    )
