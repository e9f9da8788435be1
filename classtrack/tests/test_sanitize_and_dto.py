from __future__ import annotations

from datetime import time

import pytest
from pydantic import ValidationError

from classtrack.interfaces.http.dto.auth import LoginRequestDTO, RegisterRequestDTO
from classtrack.interfaces.http.dto.courses import CourseRequestDTO
from classtrack.shared.errors import ValidationError as RequestValidationError
from classtrack.shared.errors.validation import format_pydantic_errors, raise_validation_error
from classtrack.shared.logging import sanitize_message
from classtrack.shared.utils import sanitize_input


def _registration(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret123",
        "firstName": "Alice",
        "lastName": "Smith",
        "program": "BSCS",
        "yearLevel": "2",
    }
    payload.update(overrides)
    return payload


def test_sanitize_input_strips_tags_and_escapes() -> None:
    assert sanitize_input("  bob  ") == "bob"
    assert sanitize_input("<b>bob</b>") == "bob"
    assert sanitize_input("a & b") == "a &amp; b"
    assert sanitize_input(None) == ""
    assert sanitize_input(5) == "5"


def test_sanitize_input_rejects_booleans() -> None:
    with pytest.raises(TypeError):
        sanitize_input(True)


def test_register_dto_sanitises_and_maps_aliases() -> None:
    dto = RegisterRequestDTO.model_validate(_registration(firstName=" <i>Alice</i> "))

    data = dto.to_input()
    assert data.first_name == "Alice"
    assert data.last_name == "Smith"
    assert data.year_level == "2"
    assert data.password == "secret123"


def test_register_dto_reports_missing_field() -> None:
    payload = _registration()
    payload.pop("firstName")

    with pytest.raises(ValidationError) as exc_info:
        RegisterRequestDTO.model_validate(payload)

    context = format_pydantic_errors(exc_info.value)
    assert "firstName" in context["fields"]
    assert context["errors"][0]["message"] == "Field firstName is required"


def test_register_dto_treats_markup_only_value_as_missing() -> None:
    with pytest.raises(ValidationError) as exc_info:
        RegisterRequestDTO.model_validate(_registration(program="<p></p>"))

    assert exc_info.value.errors()[0]["type"] == "missing"


def test_register_dto_rejects_bad_email() -> None:
    with pytest.raises(ValidationError) as exc_info:
        RegisterRequestDTO.model_validate(_registration(email="not-an-email"))

    with pytest.raises(RequestValidationError) as app_exc:
        raise_validation_error(exc_info.value)
    assert app_exc.value.message == "Invalid email format"


def test_register_dto_enforces_minimum_password_length() -> None:
    with pytest.raises(ValidationError) as exc_info:
        RegisterRequestDTO.model_validate(_registration(password="12345"))

    with pytest.raises(RequestValidationError) as app_exc:
        raise_validation_error(exc_info.value)
    assert app_exc.value.message == "Password must be at least 6 characters"
    assert app_exc.value.status == 400


def test_login_dto_requires_both_fields() -> None:
    with pytest.raises(ValidationError):
        LoginRequestDTO.model_validate({"username": "alice"})
    with pytest.raises(ValidationError):
        LoginRequestDTO.model_validate({"username": "  ", "password": "secret123"})

    dto = LoginRequestDTO.model_validate({"username": " alice ", "password": " secret123 "})
    assert dto.username == "alice"
    # Passwords are compared as typed.
    assert dto.password == " secret123 "


def test_login_dto_normalises_email_like_registration() -> None:
    login = LoginRequestDTO.model_validate(
        {"username": "alice@Example.com", "password": "secret123"}
    )
    registered = RegisterRequestDTO.model_validate(
        {
            "username": "alice",
            "email": "alice@Example.com",
            "password": "secret123",
            "firstName": "Alice",
            "lastName": "Smith",
            "program": "BSCS",
            "yearLevel": "2",
        }
    )

    assert login.username == registered.email == "alice@example.com"
    # Plain usernames and malformed addresses pass through untouched.
    assert LoginRequestDTO.model_validate({"username": "Alice", "password": "x"}).username == "Alice"
    assert LoginRequestDTO.model_validate({"username": "a@b", "password": "x"}).username == "a@b"


def test_course_dto_normalises_day_and_times() -> None:
    dto = CourseRequestDTO.model_validate(
        {
            "courseCode": "CS101",
            "courseTitle": "Intro to Programming",
            "scheduleDay": "monday",
            "timeStart": "08:00",
            "timeEnd": "09:30",
            "colorCode": "#4f46e5",
        }
    )

    data = dto.to_data()
    assert data.schedule_day == "Monday"
    assert data.time_start == time(8, 0)
    assert data.time_end == time(9, 30)


def test_course_dto_rejects_inverted_time_range() -> None:
    with pytest.raises(ValidationError):
        CourseRequestDTO.model_validate(
            {
                "courseCode": "CS101",
                "courseTitle": "Intro",
                "timeStart": "10:00",
                "timeEnd": "09:00",
            }
        )


def test_log_messages_redact_tokens_and_passwords() -> None:
    token = "a" * 64
    message = sanitize_message(f"Authorization: Bearer {token} password=secret123")

    assert token not in message
    assert "secret123" not in message
    assert "***REDACTED***" in message
