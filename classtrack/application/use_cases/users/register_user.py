# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import Any

from classtrack.domain.notifications.entities import (WELCOME_MESSAGE, WELCOME_TITLE,
                                                      NotificationType)
from classtrack.domain.notifications.repositories import NotificationRepository
from classtrack.domain.users.entities import NewUser, User
from classtrack.domain.users.exceptions import UserAlreadyExistsError
from classtrack.domain.users.repositories import PasswordHasher, UserRepository


@dataclass(slots=True, frozen=True)
class RegistrationInput:
    """Already sanitised and validated registration fields."""

    username: str
    email: str
    password: str
    first_name: str
    last_name: str
    program: str
    year_level: str


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        notifications: NotificationRepository,
        password_hasher: PasswordHasher,
        unit_of_work: Callable[[], AbstractContextManager[Any]] = nullcontext,
    ) -> None:
        self._users = users
        self._notifications = notifications
        self._password_hasher = password_hasher
        self._unit_of_work = unit_of_work

    def execute(self, data: RegistrationInput) -> User:
        if self._users.exists(username=data.username, email=data.email):
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(data.password)
        # The user row and its welcome notification commit together or not at all.
        with self._unit_of_work():
            # add() re-raises UserAlreadyExistsError when the unique constraint wins a race.
            user = self._users.add(
                NewUser(
                    username=data.username,
                    email=data.email,
                    password_hash=hashed,
                    first_name=data.first_name,
                    last_name=data.last_name,
                    program=data.program,
                    year_level=data.year_level,
                )
            )
            self._notifications.add(
                user.id, WELCOME_TITLE, WELCOME_MESSAGE, NotificationType.GENERAL
            )
        return user
