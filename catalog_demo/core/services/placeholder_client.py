"""Client for the public JSON test API behind the posts and users pages."""

from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict

from catalog_demo.runtime.config.config_data import PlaceholderApiConfig


class Post(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    user_id: int | None = None
    title: str
    body: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "Post":
        return cls(user_id=data.get("userId"), **data)


class PlaceholderUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    username: str
    email: str
    phone: str = ""
    website: str = ""


class PlaceholderClient:
    """Thin async wrapper over the posts and users endpoints.

    HTTP and decoding failures are logged and re-raised; callers decide how to
    render them.
    """

    def __init__(
        self,
        base_url: str = "https://jsonplaceholder.typicode.com",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @classmethod
    def from_config(cls, config: PlaceholderApiConfig) -> "PlaceholderClient":
        return cls(base_url=config.base_url, timeout=config.timeout)

    async def _get(self, path: str) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self._base_url, timeout=self._timeout, transport=self._transport
        ) as client:
            return await client.get(path)

    async def list_posts(self) -> list[Post]:
        try:
            response = await self._get("/posts")
            response.raise_for_status()
            posts = [Post.from_api(item) for item in response.json()]
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to fetch posts: {}", e)
            raise

        logger.info("Posts fetched: {}", len(posts))
        return posts

    async def list_users(self) -> list[PlaceholderUser]:
        try:
            response = await self._get("/users")
            response.raise_for_status()
            users = [PlaceholderUser.model_validate(item) for item in response.json()]
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to fetch users: {}", e)
            raise

        logger.info("Users fetched: {}", len(users))
        return users

    async def get_user(self, user_id: int | str) -> PlaceholderUser | None:
        """Fetch one user. A 404 from the API gives None."""
        try:
            response = await self._get(f"/users/{quote(str(user_id), safe='')}")
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return PlaceholderUser.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to fetch user {}: {}", user_id, e)
            raise
