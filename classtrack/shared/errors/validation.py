# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError

_GENERIC_TYPES = {"string_type", "int_type", "model_type", "dict_type"}


def _field_path(error: dict[str, Any]) -> str:
    loc = error.get("loc", ())
    return ".".join(str(part) for part in loc if part is not None)


def _message_for(error: dict[str, Any]) -> str:
    field = _field_path(error) or "request"
    error_type = error.get("type", "value_error")
    if error_type == "missing":
        return f"Field {field} is required"
    if error_type in _GENERIC_TYPES:
        return f"Field {field} has an invalid type"
    return str(error.get("msg") or f"Invalid {field}")


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors():
        field_path = _field_path(error)

        if field_path:
            fields_set.add(field_path)

        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
                "message": _message_for(error),
            }
        )

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def raise_validation_error(exc: PydanticValidationError) -> None:
    context = format_pydantic_errors(exc)
    errors = context["errors"]
    message = errors[0]["message"] if errors else "Invalid request"
    raise ValidationError(message, context=context) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
