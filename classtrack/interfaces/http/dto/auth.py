from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from classtrack.application.use_cases.users.register_user import RegistrationInput
from classtrack.shared.config import load_config
from classtrack.shared.utils import sanitize_input


def _sanitized(value: Any) -> str:
    if value is None:
        raise PydanticCustomError("missing", "Field required", {})
    try:
        return sanitize_input(value)
    except TypeError:
        raise PydanticCustomError("string_type", "Input should be a valid string", {}) from None


def _require_text(value: str) -> str:
    if not value:
        raise PydanticCustomError("missing", "Field required", {})
    return value


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=False)

    username: str = Field(max_length=64)
    email: str = Field(max_length=255)
    password: str = Field(max_length=128)
    first_name: str = Field(alias="firstName", max_length=100)
    last_name: str = Field(alias="lastName", max_length=100)
    program: str = Field(max_length=100)
    year_level: str = Field(alias="yearLevel", max_length=16)

    @field_validator(
        "username", "email", "first_name", "last_name", "program", "year_level", mode="before"
    )
    @classmethod
    def sanitize_text(cls, value: Any) -> str:
        return _sanitized(value)

    @field_validator(
        "username", "email", "first_name", "last_name", "program", "year_level"
    )
    @classmethod
    def not_empty(cls, value: str) -> str:
        return _require_text(value)

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, value: str) -> str:
        try:
            _, email = validate_email(value)
        except PydanticCustomError:
            raise PydanticCustomError("email_invalid", "Invalid email format", {}) from None
        return email

    @field_validator("password", mode="before")
    @classmethod
    def password_present(cls, value: Any) -> Any:
        if value is None or value == "":
            raise PydanticCustomError("missing", "Field required", {})
        return value

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, value: str) -> str:
        min_length = load_config().auth.min_password_length
        if len(value) < min_length:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least {min_length} characters",
                {"min_length": min_length},
            )
        return value

    def to_input(self) -> RegistrationInput:
        return RegistrationInput(
            username=self.username,
            email=self.email,
            password=self.password,
            first_name=self.first_name,
            last_name=self.last_name,
            program=self.program,
            year_level=self.year_level,
        )


class LoginRequestDTO(BaseModel):
    # "username" accepts either the username or the email address.
    username: str = Field(max_length=255)
    password: str = Field(max_length=128)  # No strength check on login

    @field_validator("username", mode="before")
    @classmethod
    def sanitize_login(cls, value: Any) -> str:
        return _require_text(_sanitized(value))

    @field_validator("username")
    @classmethod
    def normalize_email_login(cls, value: str) -> str:
        # Emails are stored normalised at registration; match that form here.
        if "@" not in value:
            return value
        try:
            _, email = validate_email(value)
        except PydanticCustomError:
            return value
        return email

    @field_validator("password", mode="before")
    @classmethod
    def password_present(cls, value: Any) -> Any:
        if value is None or value == "":
            raise PydanticCustomError("missing", "Field required", {})
        return value


class MessageDTO(BaseModel):
    success: bool = True
    message: str


class LoginSuccessDTO(MessageDTO):
    user: dict[str, Any]
    token: str


class AuthStatusDTO(BaseModel):
    success: bool = True
    authenticated: bool
    user: dict[str, Any] | None = None
