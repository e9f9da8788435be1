# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

WELCOME_TITLE = "Welcome to ClassTrack!"
WELCOME_MESSAGE = (
    "Welcome to ClassTrack! Start by adding your courses and assignments to stay organized."
)


class NotificationType(StrEnum):
    GENERAL = "general"
    ASSIGNMENT = "assignment"
    GRADE = "grade"
    REMINDER = "reminder"


@dataclass(slots=True, frozen=True)
class Notification:

    id: int
    user_id: int
    title: str
    message: str
    type: NotificationType
    is_read: bool
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "message": self.message,
            "type": self.type.value,
            "is_read": self.is_read,
            "created_at": self.created_at.isoformat(),
        }
