# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any


class UserStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


@dataclass(slots=True, frozen=True)
class NewUser:

    username: str
    email: str
    password_hash: str
    first_name: str
    last_name: str
    program: str
    year_level: str


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str
    password_hash: str
    first_name: str
    last_name: str
    program: str
    year_level: str
    status: UserStatus
    created_at: datetime

    @property
    def is_active(self) -> bool:
        return self.status is UserStatus.ACTIVE

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def public_profile(self, *, include_created_at: bool = False) -> dict[str, Any]:
        """Profile fields safe to hand to clients; never includes the hash."""
        profile: dict[str, Any] = {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "program": self.program,
            "year_level": self.year_level,
        }
        if include_created_at:
            profile["created_at"] = self.created_at.isoformat()
        return profile


@dataclass(slots=True, frozen=True)
class SessionToken:

    user_id: int
    token: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now


@dataclass(slots=True, frozen=True)
class Identity:
    """Who an authenticated request acts as."""

    user_id: int
    username: str
    display_name: str
