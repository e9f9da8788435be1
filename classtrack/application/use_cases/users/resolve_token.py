# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from classtrack.domain.users.entities import Identity, User
from classtrack.domain.users.repositories import SessionTokenRepository, UserRepository


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _active_identity(user: User | None) -> Identity | None:
    if user is None or not user.is_active:
        return None
    return Identity(user_id=user.id, username=user.username, display_name=user.display_name)


class ResolveTokenUseCase:
    """Turn a bearer token into an identity, or ``None`` if it is unknown or expired."""

    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._clock = clock

    def execute(self, token: str) -> Identity | None:
        if not token:
            return None
        session_token = self._tokens.find_valid(token, self._clock())
        if session_token is None:
            return None
        return _active_identity(self._users.find_by_id(session_token.user_id))


class ResolveSessionUseCase:
    """Re-read the owner of an interactive session; ``None`` once it is no longer active."""

    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> Identity | None:
        return _active_identity(self._users.find_by_id(user_id))
