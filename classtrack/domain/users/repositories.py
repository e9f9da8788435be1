# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import NewUser, SessionToken, User


class UserRepository(Protocol):
    def find_active_by_login(self, login: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def exists(self, *, username: str, email: str) -> bool: ...
    def add(self, user: NewUser) -> User: ...


class SessionTokenRepository(Protocol):
    def issue(self, user_id: int) -> SessionToken: ...
    def find_valid(self, token: str, now: datetime) -> SessionToken | None: ...
    def revoke_all_for_user(self, user_id: int) -> int: ...
    def purge_expired(self, now: datetime) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
