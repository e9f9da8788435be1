# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True, eq=False)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str = ""
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "success": False,
            "message": self.message or self.status.phrase,
            "error": self.code,
        }
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    """Business rule failure; subclasses pin ``code``, ``status`` and ``message``."""

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(str, getattr(self, "message", ""))
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            message=resolved_message,
            context=context,
        )


class ValidationError(AppError):
    def __init__(
        self,
        message: str = "Invalid request",
        *,
        code: str = "validation_error",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class AuthenticationError(AppError):
    def __init__(
        self,
        message: str = "Authentication required",
        *,
        code: str = "unauthorized",
    ) -> None:
        super().__init__(code=code, status=HTTPStatus.UNAUTHORIZED, message=message)


class NotFoundError(AppError):
    def __init__(
        self,
        message: str = "Not found",
        *,
        code: str = "not_found",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.NOT_FOUND,
            message=message,
            context=context,
        )


class ConflictError(AppError):
    def __init__(
        self,
        message: str = "Conflict",
        *,
        code: str = "conflict",
    ) -> None:
        super().__init__(code=code, status=HTTPStatus.CONFLICT, message=message)


class InternalError(AppError):
    def __init__(
        self,
        code: str = "internal_error",
        *,
        message: str = "Internal server error",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
            context=context,
        )


class RateLimitedError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="rate_limited",
            status=HTTPStatus.TOO_MANY_REQUESTS,
            message="Too many requests",
        )


class UnknownActionError(AppError):
    def __init__(self, action: str) -> None:
        super().__init__(
            code="unknown_action",
            status=HTTPStatus.NOT_FOUND,
            message="Unknown action",
            context={"action": action} if action else None,
        )


class MethodNotAllowedError(AppError):
    def __init__(self, method: str) -> None:
        super().__init__(
            code="method_not_allowed",
            status=HTTPStatus.METHOD_NOT_ALLOWED,
            message="Method not allowed",
            context={"method": method},
        )
