# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from classtrack.domain.users.entities import Identity, SessionToken, User
from classtrack.domain.users.exceptions import InvalidCredentialsError
from classtrack.domain.users.repositories import (PasswordHasher, SessionTokenRepository,
                                                  UserRepository)


@dataclass(slots=True, frozen=True)
class LoginResult:
    user: User
    token: SessionToken

    @property
    def identity(self) -> Identity:
        return Identity(
            user_id=self.user.id,
            username=self.user.username,
            display_name=self.user.display_name,
        )


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._dummy_hash: str | None = None

    def _decoy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash("classtrack-decoy-password")
        return self._dummy_hash

    def execute(self, login: str, password: str) -> LoginResult:
        user = self._users.find_active_by_login(login)
        if user is None:
            # Same hashing cost as a real mismatch, same error.
            self._password_hasher.verify(password, self._decoy_hash())
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        return LoginResult(user=user, token=token)
