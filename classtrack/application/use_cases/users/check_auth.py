# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from classtrack.domain.users.entities import User
from classtrack.domain.users.exceptions import UserNotFoundError
from classtrack.domain.users.repositories import UserRepository


class CheckAuthUseCase:
    """Re-read the acting user so a deactivated account stops counting as logged in."""

    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int | None) -> User | None:
        if user_id is None:
            return None
        user = self._users.find_by_id(user_id)
        if user is None or not user.is_active:
            return None
        return user


class GetProfileUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user
