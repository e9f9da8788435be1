# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Notification, NotificationType


class NotificationRepository(Protocol):
    def add(
        self,
        user_id: int,
        title: str,
        message: str,
        type_: NotificationType = NotificationType.GENERAL,
    ) -> Notification: ...

    def list_for_user(self, user_id: int, limit: int | None = None) -> Sequence[Notification]: ...

    def mark_all_read(self, user_id: int) -> int: ...
