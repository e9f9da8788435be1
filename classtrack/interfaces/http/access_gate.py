# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request identity resolution and the gate every tenant-scoped endpoint passes."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import wraps
from typing import Any

from flask import Flask, g, request, session

from classtrack.domain.users.entities import Identity
from classtrack.shared.errors import AuthenticationError
from classtrack.shared.logging import logger

SESSION_USER_ID = "user_id"
SESSION_USERNAME = "username"
SESSION_DISPLAY_NAME = "user_name"

TokenResolver = Callable[[str], Identity | None]
SessionResolver = Callable[[int], Identity | None]


@dataclass(slots=True, frozen=True)
class AuthContext:
    identity: Identity | None = None
    source: str | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def user_id(self) -> int | None:
        return self.identity.user_id if self.identity else None


ANONYMOUS = AuthContext()


def bearer_token(authorization: str | None) -> str:
    if not authorization:
        return ""
    scheme, _, value = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return value.strip()


def identity_from_session(data: Mapping[str, Any]) -> Identity | None:
    user_id = data.get(SESSION_USER_ID)
    if not isinstance(user_id, int) or isinstance(user_id, bool) or user_id <= 0:
        return None
    return Identity(
        user_id=user_id,
        username=str(data.get(SESSION_USERNAME) or ""),
        display_name=str(data.get(SESSION_DISPLAY_NAME) or ""),
    )


def resolve_auth_context(
    session_data: Mapping[str, Any],
    authorization: str | None,
    resolve_token: TokenResolver,
    resolve_session: SessionResolver | None = None,
) -> AuthContext:
    """Interactive session first, then a bearer token checked against the token store.

    ``resolve_session`` re-reads the session owner so a cookie issued before the
    account was deactivated stops counting.
    """
    identity = identity_from_session(session_data)
    if identity is not None and resolve_session is not None:
        current = resolve_session(identity.user_id)
        if current is None:
            logger.warning(f"auth.context: session user_id={identity.user_id} no longer active")
        identity = current
    if identity is not None:
        return AuthContext(identity=identity, source="session")

    token = bearer_token(authorization)
    if token:
        identity = resolve_token(token)
        if identity is not None:
            return AuthContext(identity=identity, source="token", token=token)
        logger.warning("auth.context: bearer token unknown or expired")
    return ANONYMOUS


def require_auth(context: AuthContext) -> int:
    """Return the tenancy key for the request or stop it with a 401."""
    if context.identity is None:
        raise AuthenticationError("Authentication required")
    return context.identity.user_id


def current_auth() -> AuthContext:
    return getattr(g, "auth", ANONYMOUS)


def configure_auth_context(
    app: Flask,
    resolve_token: TokenResolver,
    resolve_session: SessionResolver | None = None,
) -> None:
    @app.before_request
    def _resolve_identity() -> None:
        if request.method == "OPTIONS":
            g.auth = ANONYMOUS
            return
        g.auth = resolve_auth_context(
            session, request.headers.get("Authorization"), resolve_token, resolve_session
        )
        if g.auth.source != "session" and identity_from_session(session) is not None:
            session.clear()
        g.user_id = g.auth.user_id


def auth_required(f):
    """Run the Access Gate, then call ``f`` with the context as ``auth=``."""

    @wraps(f)
    def inner(*a, **kw):
        context = current_auth()
        try:
            require_auth(context)
        except AuthenticationError:
            logger.warning(
                f"Auth required on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise
        kw["auth"] = context
        return f(*a, **kw)

    return inner


def establish_session(identity: Identity) -> None:
    session.clear()
    session.permanent = True
    session[SESSION_USER_ID] = identity.user_id
    session[SESSION_USERNAME] = identity.username
    session[SESSION_DISPLAY_NAME] = identity.display_name
    g.auth = AuthContext(identity=identity, source="session")
    g.user_id = identity.user_id


def clear_session() -> None:
    session.clear()
    g.auth = ANONYMOUS
    g.user_id = None


__all__ = [
    "ANONYMOUS",
    "AuthContext",
    "auth_required",
    "bearer_token",
    "clear_session",
    "configure_auth_context",
    "current_auth",
    "establish_session",
    "identity_from_session",
    "require_auth",
    "resolve_auth_context",
]
