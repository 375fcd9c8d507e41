"""Tests for the sign-up, sign-in and sign-out form actions."""

from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError

from catalog_demo.core.errors import InvalidCredentialsError, UserAlreadyExistsError
from catalog_demo.core.services.auth import (
    SIGN_IN_FAILED,
    SIGN_IN_SUCCESS,
    SIGN_OUT_FAILED,
    SIGN_OUT_SUCCESS,
    SIGN_UP_FAILED,
    SIGN_UP_SUCCESS,
    AuthService,
    sign_in_action,
    sign_out_action,
    sign_up_action,
    validate_sign_in,
    validate_sign_up,
)


@pytest.fixture
def mock_service():
    return Mock(spec=AuthService)


class TestValidateSignUp:
    def test_valid_form(self):
        assert validate_sign_up("Ada", "ada@example.com", "long-enough") is None

    def test_name_checked_first(self):
        """With several bad fields only the first rule is reported."""
        state = validate_sign_up("A", "not-an-email", "short")

        assert state.success is False
        assert state.message == "Please enter a valid name (at least 2 characters)."
        assert state.errors == {"name": "Name must be at least 2 characters"}
        assert state.values == {"name": "A", "email": "not-an-email"}

    @pytest.mark.parametrize("email", [None, "", "ada.example.com"])
    def test_invalid_email(self, email):
        state = validate_sign_up("Ada", email, "long-enough")

        assert state.message == "Please enter a valid email address."
        assert state.error_for("email") == "Invalid email address"

    def test_short_password_keeps_values(self):
        state = validate_sign_up("Ada", "ada@example.com", "1234567")

        assert state.message == "Password must be at least 8 characters long."
        assert state.error_for("password") == "Password must be at least 8 characters"
        assert state.value_for("name") == "Ada"
        assert state.value_for("email") == "ada@example.com"
        assert state.value_for("password") == ""


class TestValidateSignIn:
    def test_valid(self):
        assert validate_sign_in("ada@example.com", "whatever1") is None

    def test_email_before_password(self):
        state = validate_sign_in("ada", "")
        assert state.errors == {"email": "Invalid email address"}

    def test_short_password(self):
        state = validate_sign_in("ada@example.com", "short")
        assert state.errors == {"password": "Password must be at least 8 characters"}


class TestSignUpAction:
    def test_success(self, auth_service, user_credentials):
        result = sign_up_action(auth_service, **user_credentials)

        assert result.success is True
        assert result.state.message == SIGN_UP_SUCCESS
        assert result.auth is not None
        assert result.auth.auth_session.user.email == "ada@example.com"

    def test_invalid_input_never_reaches_the_service(self, mock_service):
        result = sign_up_action(mock_service, "Ada", "ada@example.com", "short")

        assert result.success is False
        assert result.auth is None
        mock_service.sign_up_email.assert_not_called()

    def test_duplicate_email(self, auth_service, registered_user, user_credentials):
        result = sign_up_action(auth_service, **user_credentials)

        assert result.success is False
        assert result.state.message == SIGN_UP_FAILED
        assert result.state.values == {"name": "Ada Lovelace", "email": "ada@example.com"}

    def test_service_errors_become_state(self, mock_service):
        mock_service.sign_up_email.side_effect = UserAlreadyExistsError("taken")

        result = sign_up_action(mock_service, "Ada", "ada@example.com", "long-enough")

        assert result.state.message == SIGN_UP_FAILED

    def test_database_errors_become_state(self, mock_service):
        mock_service.sign_up_email.side_effect = OperationalError("INSERT", {}, Exception("down"))

        result = sign_up_action(mock_service, "Ada", "ada@example.com", "long-enough")

        assert result.success is False
        assert result.state.message == SIGN_UP_FAILED


class TestSignInAction:
    def test_success(self, auth_service, registered_user, user_credentials):
        result = sign_in_action(
            auth_service, user_credentials["email"], user_credentials["password"]
        )

        assert result.success is True
        assert result.state.message == SIGN_IN_SUCCESS
        assert result.auth.token

    def test_wrong_password(self, auth_service, registered_user, user_credentials):
        result = sign_in_action(auth_service, user_credentials["email"], "wrong-password")

        assert result.success is False
        assert result.state.message == SIGN_IN_FAILED
        assert result.state.errors is None

    def test_service_error(self, mock_service):
        mock_service.sign_in_email.side_effect = InvalidCredentialsError("nope")

        result = sign_in_action(mock_service, "ada@example.com", "long-enough")

        assert result.state.message == SIGN_IN_FAILED

    def test_invalid_input(self, mock_service):
        result = sign_in_action(mock_service, "", "")

        assert result.state.error_for("email") == "Invalid email address"
        mock_service.sign_in_email.assert_not_called()


class TestSignOutAction:
    def test_success(self, auth_service, registered_user):
        result = sign_out_action(auth_service, registered_user.token)

        assert result.success is True
        assert result.state.message == SIGN_OUT_SUCCESS
        assert auth_service.get_session(registered_user.token) is None

    def test_without_token(self, mock_service):
        assert sign_out_action(mock_service, None).success is True

    def test_database_error(self, mock_service):
        mock_service.sign_out.side_effect = OperationalError("DELETE", {}, Exception("down"))

        result = sign_out_action(mock_service, "token")

        assert result.success is False
        assert result.state.message == SIGN_OUT_FAILED
