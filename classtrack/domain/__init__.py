# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .courses.entities import Course, CourseData
from .notifications.entities import Notification, NotificationType
from .users.entities import Identity, NewUser, SessionToken, User, UserStatus

__all__ = [
    "Course",
    "CourseData",
    "Identity",
    "NewUser",
    "Notification",
    "NotificationType",
    "SessionToken",
    "User",
    "UserStatus",
]
