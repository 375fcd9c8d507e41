"""Tests for the JSON test API client."""

import httpx
import pytest

from catalog_demo.core.services import PlaceholderClient, Post
from catalog_demo.runtime.config.config_data import PlaceholderApiConfig


def _client(handler) -> PlaceholderClient:
    return PlaceholderClient(base_url="https://placeholder.test/", transport=httpx.MockTransport(handler))


class TestPlaceholderClient:
    @pytest.mark.asyncio
    async def test_list_posts(self, placeholder_client):
        posts = await placeholder_client.list_posts()

        assert len(posts) == 8
        assert posts[0] == Post(id=1, user_id=1, title="Post title 1", body="Body of post 1")

    @pytest.mark.asyncio
    async def test_list_users_ignores_extra_fields(self, placeholder_client):
        users = await placeholder_client.list_users()

        assert [u.username for u in users] == ["Bret", "Antonette"]
        assert users[0].website == "hildegard.org"

    @pytest.mark.asyncio
    async def test_get_user(self, placeholder_client):
        user = await placeholder_client.get_user(2)
        assert user.name == "Ervin Howell"

    @pytest.mark.asyncio
    async def test_missing_user_is_none(self, placeholder_client):
        assert await placeholder_client.get_user(99) is None

    @pytest.mark.asyncio
    async def test_user_id_is_escaped(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.raw_path)
            return httpx.Response(404)

        assert await _client(handler).get_user("1/../posts") is None
        assert seen == [b"/users/1%2F..%2Fposts"]

    @pytest.mark.asyncio
    async def test_server_error_is_raised(self):
        client = _client(lambda request: httpx.Response(500, json={}))

        with pytest.raises(httpx.HTTPStatusError):
            await client.list_posts()

    @pytest.mark.asyncio
    async def test_invalid_json_is_raised(self):
        client = _client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(ValueError):
            await client.list_users()

    def test_from_config(self):
        client = PlaceholderClient.from_config(
            PlaceholderApiConfig(base_url="https://example.test/api/")
        )
        assert client.base_url == "https://example.test/api"
