# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from classtrack.application.use_cases.notifications.notifications import (
    ListNotificationsUseCase, MarkAllReadUseCase)
from classtrack.interfaces.http.access_gate import AuthContext, auth_required
from classtrack.interfaces.http.routing import ActionRouter


class NotificationsController:
    def __init__(
        self,
        *,
        list_notifications: ListNotificationsUseCase,
        mark_all_read: MarkAllReadUseCase,
    ) -> None:
        self._list = list_notifications
        self._mark_all_read = mark_all_read

    @auth_required
    def list_notifications(self, auth: AuthContext):
        feed = self._list.execute(auth.user_id)
        return jsonify(
            {
                "success": True,
                "notifications": [item.to_dict() for item in feed.items],
                "unread": feed.unread,
            }
        )

    @auth_required
    def mark_all_read(self, auth: AuthContext):
        updated = self._mark_all_read.execute(auth.user_id)
        return jsonify(
            {"success": True, "message": "All notifications marked as read", "updated": updated}
        )

    def router(self) -> ActionRouter:
        return (
            ActionRouter("notifications", "/api/notifications")
            .get("list", self.list_notifications)
            .post("markAllRead", self.mark_all_read)
        )

    def as_blueprint(self) -> Blueprint:
        return self.router().as_blueprint()
