"""State objects returned by form actions for inline display."""

from typing import Literal

from pydantic import BaseModel

FieldName = Literal["name", "email", "password", "message"]
FieldErrors = dict[str, str]
FieldValues = dict[str, str]


class ActionState(BaseModel):
    success: bool
    message: str
    errors: FieldErrors | None = None
    values: FieldValues | None = None

    @classmethod
    def ok(cls, message: str) -> "ActionState":
        return cls(success=True, message=message)

    @classmethod
    def fail(
        cls,
        message: str,
        errors: FieldErrors | None = None,
        values: FieldValues | None = None,
    ) -> "ActionState":
        return cls(success=False, message=message, errors=errors, values=values)

    def error_for(self, field: FieldName) -> str | None:
        return (self.errors or {}).get(field)

    def value_for(self, field: FieldName) -> str:
        return (self.values or {}).get(field) or ""
