"""Pages rendered from the public JSON test API."""

from fastapi import APIRouter, Depends, Request
from loguru import logger
from starlette.responses import HTMLResponse

from catalog_demo.api.http.deps import get_optional_auth_session, get_placeholder_client
from catalog_demo.api.http.templating import render
from catalog_demo.core.services import PlaceholderClient
from catalog_demo.runtime.context import get_config

router = APIRouter(tags=["external"], dependencies=[Depends(get_optional_auth_session)])


@router.get("/posts", response_class=HTMLResponse)
async def posts_page(
    request: Request, client: PlaceholderClient = Depends(get_placeholder_client)
):
    logger.info("Posts page")
    posts = await client.list_posts()
    limit = get_config().placeholder_api.posts_limit
    return render(request, "posts.html", posts=posts[:limit], source=client.base_url)


@router.get("/users", response_class=HTMLResponse)
async def users_page(
    request: Request, client: PlaceholderClient = Depends(get_placeholder_client)
):
    logger.info("Users page")
    users = await client.list_users()
    return render(request, "users.html", users=users)


@router.get("/users/{user_id}", response_class=HTMLResponse)
async def user_page(
    request: Request,
    user_id: str,
    client: PlaceholderClient = Depends(get_placeholder_client),
):
    logger.info("UserPage {}", user_id)
    user = await client.get_user(user_id)
    return render(request, "user_detail.html", user=user, user_id=user_id)
