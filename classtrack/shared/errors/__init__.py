from .base import (
    AppError,
    AuthenticationError,
    ConflictError,
    DomainError,
    InternalError,
    MethodNotAllowedError,
    NotFoundError,
    RateLimitedError,
    UnknownActionError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "InternalError",
    "MethodNotAllowedError",
    "NotFoundError",
    "RateLimitedError",
    "UnknownActionError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
