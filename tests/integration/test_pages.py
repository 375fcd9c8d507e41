"""Integration tests for the public pages and the request pipeline."""

import httpx
from fastapi.testclient import TestClient

from catalog_demo.api.http.app import app
from catalog_demo.api.http.app_data import ApplicationDependencies
from catalog_demo.core.services import DbSessionService, PlaceholderClient


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_ready(self, client):
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["checks"]["database"] == {"status": "healthy", "type": "sqlite"}


class TestRequestPipeline:
    def test_response_time_and_request_id(self, client):
        response = client.get("/about", headers={"X-Request-ID": "req-123"})

        assert response.headers["x-response-time"].endswith("ms")
        assert response.headers["X-Request-ID"] == "req-123"
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_static_files_are_not_timed(self, client):
        response = client.get("/static/styles.css")

        assert response.status_code == 200
        assert "x-response-time" not in response.headers

    def test_unknown_page_renders_not_found(self, client):
        response = client.get("/no-such-page")

        assert response.status_code == 404
        assert "404 - Page not found" in response.text

    def test_unknown_api_route_returns_json(self, client):
        response = client.get("/api/no-such-route")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}


class TestStaticPages:
    def test_index_lists_the_demos(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert 'href="/products"' in response.text
        assert 'href="/contact"' in response.text
        assert "Sign in" in response.text

    def test_pages_are_rendered_once(self, client):
        client.get("/")
        client.get("/about")
        cache = app.state.app_dependencies.static_pages
        first = cache["pages/index.html"]

        client.get("/")

        assert set(cache) == {"pages/index.html", "pages/about.html"}
        assert cache["pages/index.html"] is first


class TestContact:
    def test_form(self, client):
        response = client.get("/contact")
        assert response.status_code == 200
        assert 'action="/contact/redirect"' in response.text

    def test_inline_errors_keep_values(self, client):
        response = client.post(
            "/contact", data={"name": "G", "email": "grace@example.com", "message": "short"}
        )

        assert response.status_code == 200
        assert "Name must be at least 2 characters" in response.text
        assert "Message must be at least 10 characters" in response.text
        assert 'value="grace@example.com"' in response.text

    def test_inline_success_clears_form(self, client):
        response = client.post(
            "/contact",
            data={"name": "Grace", "email": "grace@example.com", "message": "Hello from the tests!"},
        )

        assert "Form submitted successfully" in response.text
        assert 'value="grace@example.com"' not in response.text

    def test_redirect_on_success(self, client):
        response = client.post(
            "/contact/redirect",
            data={"name": "Grace", "email": "grace@example.com", "message": "Hello from the tests!"},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/contact/thank-you"
        assert client.get("/contact/thank-you").status_code == 200

    def test_redirect_on_error_carries_message(self, client):
        response = client.post(
            "/contact/redirect", data={"name": "", "email": "", "message": ""}, follow_redirects=False
        )

        assert response.status_code == 303
        assert response.headers["location"].startswith("/contact?error=Name%20is%20required")

        page = client.get(response.headers["location"])
        assert "Name is required. Email is required. Message is required" in page.text

    def test_json_endpoint(self, client):
        response = client.post("/api/contact", json={"name": "G", "email": "x", "message": ""})

        body = response.json()
        assert response.status_code == 200
        assert body["success"] is False
        assert body["errors"]["email"] == "Please enter a valid email address"
        assert "timestamp" in body

    def test_json_endpoint_whitespace_values_are_too_short(self, client):
        response = client.post(
            "/api/contact",
            json={"name": "   ", "email": "grace@example.com", "message": " " * 20},
        )

        assert response.json()["errors"] == {
            "name": "Name must be at least 2 characters",
            "message": "Message must be at least 10 characters",
        }


class TestExternalPages:
    def test_posts_shows_first_five(self, client):
        response = client.get("/posts")

        assert response.status_code == 200
        assert "5. Post title 5" in response.text
        assert "6. Post title 6" not in response.text
        assert "https://placeholder.test/posts" in response.text

    def test_users(self, client):
        response = client.get("/users")

        assert "Leanne Graham" in response.text
        assert 'href="/users/2"' in response.text

    def test_user_detail(self, client):
        response = client.get("/users/1")

        assert response.status_code == 200
        assert "Sincere@april.biz" in response.text

    def test_unknown_user_falls_back_to_id(self, client):
        response = client.get("/users/42")

        assert response.status_code == 200
        assert "User ID: 42" in response.text

    def test_upstream_failure_renders_error_page(self, test_config, engine):
        failing = PlaceholderClient(
            base_url="https://placeholder.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(503)),
        )
        app.state.app_dependencies = ApplicationDependencies(
            database_service=DbSessionService(engine), placeholder_client=failing
        )
        try:
            with TestClient(app) as test_client:
                response = test_client.get("/posts")
        finally:
            app.state.app_dependencies = None

        assert response.status_code == 500
        assert "Something went wrong" in response.text
        assert response.headers["X-Request-ID"]


class TestDbTest:
    def test_lists_tables(self, client):
        response = client.get("/dbtest")

        assert response.status_code == 200
        assert "Connected." in response.text
        assert "<code>products</code>" in response.text
        assert "No users." in response.text

    def test_lists_registered_users(self, client, sign_up):
        sign_up()

        response = client.get("/dbtest")

        assert "Ada Lovelace" in response.text
