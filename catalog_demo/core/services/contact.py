"""Contact form validation and submission."""

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field, field_validator

from catalog_demo.entities.core._base import utc_now

EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)

SUBMITTED_MESSAGE = "Form submitted successfully"


def _is_missing(value: Any) -> bool:
    return not value or not isinstance(value, str)


def _check_text(value: Any, label: str, minimum: int, maximum: int) -> list[str]:
    if _is_missing(value):
        return [f"{label} is required"]
    if len(value.strip()) < minimum:
        return [f"{label} must be at least {minimum} characters"]
    # The upper bound counts surrounding whitespace
    if len(value) > maximum:
        return [f"{label} must not exceed {maximum} characters"]
    return []


def _check_email(value: Any) -> list[str]:
    if _is_missing(value):
        return ["Email is required"]
    errors = []
    if not EMAIL_PATTERN.match(value):
        errors.append("Please enter a valid email address")
    if len(value) > 255:
        errors.append("Email must not exceed 255 characters")
    return errors


def _field_errors(data: Mapping[str, Any]) -> dict[str, list[str]]:
    """Violated rules keyed by field. Fields without violations are left out."""
    checks = {
        "name": _check_text(data.get("name"), "Name", 2, 100),
        "email": _check_email(data.get("email")),
        "message": _check_text(data.get("message"), "Message", 10, 500),
    }
    return {field: messages for field, messages in checks.items() if messages}


class ContactForm(BaseModel):
    """An accepted submission. Text fields are trimmed, the email lower-cased."""

    name: str
    email: str
    message: str

    @field_validator("name", "message", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", mode="before")
    @classmethod
    def _normalise_email(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


class ContactResult(BaseModel):
    success: bool
    message: str
    timestamp: datetime = Field(default_factory=utc_now)
    errors: dict[str, str] | None = None


def validate_contact(data: Mapping[str, Any]) -> list[str]:
    """Every violated rule, in field order. Empty when the submission is valid."""
    return [message for messages in _field_errors(data).values() for message in messages]


def submit_contact(data: Mapping[str, Any]) -> ContactResult:
    """Validate and record a submission.

    Invalid input is reported on the result, never raised.
    """
    errors = _field_errors(data)
    if errors:
        logger.info("Contact form rejected: {}", list(errors))
        return ContactResult(
            success=False,
            message=". ".join(validate_contact(data)),
            errors={field: ". ".join(messages) for field, messages in errors.items()},
        )

    form = ContactForm.model_validate(dict(data))
    result = ContactResult(success=True, message=SUBMITTED_MESSAGE)
    logger.info(
        "Contact form submission at {}: name={!r} email={!r} message={!r}",
        result.timestamp.isoformat(),
        form.name,
        form.email,
        form.message,
    )
    return result
