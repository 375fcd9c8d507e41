"""Integration tests for registration, sign-in, sign-out and the protected page."""

from catalog_demo.core.services.auth import SIGN_IN_FAILED, SIGN_OUT_SUCCESS, SIGN_UP_FAILED
from catalog_demo.runtime.context import get_config


def _register(client, credentials):
    return client.post("/register", data=credentials, follow_redirects=False)


class TestRegisterPage:
    def test_form(self, client):
        response = client.get("/register")

        assert response.status_code == 200
        assert 'name="password"' in response.text

    def test_success_redirects_to_login(self, client, user_credentials):
        response = _register(client, user_credentials)

        assert response.status_code == 303
        assert response.headers["location"] == "/login?registered=true"
        assert get_config().auth.cookie_name in response.cookies

        login = client.get(response.headers["location"])
        assert "Registration successful!" in login.text

    def test_validation_errors_rerender_the_form(self, client):
        response = _register(client, {"name": "Ada", "email": "ada@example.com", "password": "short"})

        assert response.status_code == 200
        assert "Password must be at least 8 characters long." in response.text
        assert 'value="ada@example.com"' in response.text

    def test_duplicate_email(self, client, user_credentials):
        _register(client, user_credentials)
        client.cookies.clear()

        response = _register(client, user_credentials)

        assert response.status_code == 200
        assert SIGN_UP_FAILED in response.text


class TestProtectedPage:
    def test_redirects_to_login_with_callback(self, client):
        response = client.get("/protectedpage", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/login?callbackUrl=/protectedpage"

    def test_visible_when_signed_in(self, client, sign_up):
        sign_up()

        response = client.get("/protectedpage")

        assert response.status_code == 200
        assert "Hello Secret" in response.text
        assert "Welcome back!" not in response.text
        assert "Signed in as <strong>ada@example.com</strong>" in response.text

    def test_forged_cookie_is_ignored(self, client):
        client.cookies.set(get_config().auth.cookie_name, "forged-token.bad-signature")

        response = client.get("/protectedpage", follow_redirects=False)

        assert response.status_code == 303


class TestLogin:
    def test_callback_url_is_kept_in_the_form(self, client):
        response = client.get("/login", params={"callbackUrl": "/protectedpage"})

        assert 'name="callbackUrl" value="/protectedpage"' in response.text

    def test_sign_in_follows_callback(self, client, sign_up, user_credentials):
        sign_up()
        client.cookies.clear()

        response = client.post(
            "/login",
            data={
                "email": user_credentials["email"],
                "password": user_credentials["password"],
                "callbackUrl": "/protectedpage?loggedIn=true",
            },
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/protectedpage?loggedIn=true"

        page = client.get(response.headers["location"])
        assert "Welcome back!" in page.text

    def test_external_callback_is_replaced(self, client, sign_up, user_credentials):
        sign_up()

        response = client.post(
            "/login",
            data={**user_credentials, "callbackUrl": "https://evil.example/steal"},
            follow_redirects=False,
        )

        assert response.headers["location"] == "/"

    def test_wrong_password(self, client, sign_up, user_credentials):
        sign_up()
        client.cookies.clear()

        response = client.post(
            "/login",
            data={"email": user_credentials["email"], "password": "wrong-password"},
            follow_redirects=False,
        )

        assert response.status_code == 200
        assert SIGN_IN_FAILED in response.text
        assert 'value="ada@example.com"' in response.text


class TestLogout:
    def test_logout_clears_the_session(self, client, sign_up):
        sign_up()

        response = client.post("/logout", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/login"
        assert client.get("/api/auth/session").json() is None
        assert client.get("/protectedpage", follow_redirects=False).status_code == 303

    def test_logout_without_session(self, client):
        response = client.post("/logout", follow_redirects=False)
        assert response.status_code == 303


class TestAuthApi:
    def test_session_is_null_when_signed_out(self, client):
        response = client.get("/api/auth/session")

        assert response.status_code == 200
        assert response.json() is None

    def test_sign_up_returns_state_and_session(self, client, sign_up):
        sign_up()

        session = client.get("/api/auth/session").json()

        assert session["user"]["email"] == "ada@example.com"
        assert session["user"]["emailVerified"] is False
        assert "expiresAt" in session["session"]

    def test_sign_up_validation_state(self, client):
        response = client.post(
            "/api/auth/sign-up", data={"name": "A", "email": "a@example.com", "password": "long-enough"}
        )

        assert response.json() == {
            "success": False,
            "message": "Please enter a valid name (at least 2 characters).",
            "errors": {"name": "Name must be at least 2 characters"},
            "values": {"name": "A", "email": "a@example.com"},
        }

    def test_sign_in_failure_state(self, client):
        response = client.post(
            "/api/auth/sign-in", data={"email": "nobody@example.com", "password": "long-enough"}
        )

        assert response.json() == {"success": False, "message": SIGN_IN_FAILED}
        assert get_config().auth.cookie_name not in response.cookies

    def test_sign_in_and_out(self, client, sign_up, user_credentials):
        sign_up()
        client.cookies.clear()

        signed_in = client.post(
            "/api/auth/sign-in",
            data={"email": user_credentials["email"], "password": user_credentials["password"]},
        )
        assert signed_in.json()["success"] is True
        assert client.get("/api/auth/session").json()["user"]["name"] == "Ada Lovelace"

        signed_out = client.post("/api/auth/sign-out")
        assert signed_out.json() == {"success": True, "message": SIGN_OUT_SUCCESS}
        assert client.get("/api/auth/session").json() is None


class TestAuthFlags:
    def test_sign_up_success_flag(self, client, user_credentials):
        response = client.post("/auth/flags/sign-up", data=user_credentials, follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/auth/flags?success=signup"

    def test_sign_in_error_flag(self, client):
        response = client.post(
            "/auth/flags/sign-in",
            data={"email": "nobody@example.com", "password": "long-enough"},
            follow_redirects=False,
        )

        assert response.headers["location"] == "/auth/flags?error=signin"
        page = client.get(response.headers["location"])
        assert "Sign in failed. Please check your email and password." in page.text
