# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from classtrack.domain.notifications.entities import Notification
from classtrack.domain.notifications.repositories import NotificationRepository


@dataclass(slots=True, frozen=True)
class NotificationFeed:
    items: list[Notification]

    @property
    def unread(self) -> int:
        return sum(1 for item in self.items if not item.is_read)


class ListNotificationsUseCase:
    def __init__(self, *, notifications: NotificationRepository, limit: int = 50) -> None:
        self._notifications = notifications
        self._limit = limit

    def execute(self, user_id: int) -> NotificationFeed:
        return NotificationFeed(
            items=list(self._notifications.list_for_user(user_id, limit=self._limit))
        )


class MarkAllReadUseCase:
    def __init__(self, *, notifications: NotificationRepository) -> None:
        self._notifications = notifications

    def execute(self, user_id: int) -> int:
        return self._notifications.mark_all_read(user_id)
