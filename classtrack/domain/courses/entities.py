# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Any

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


@dataclass(slots=True, frozen=True)
class CourseData:
    """Writable course fields, shared by create and update."""

    course_code: str
    course_title: str
    instructor: str | None = None
    color_code: str | None = None
    schedule_day: str | None = None
    time_start: time | None = None
    time_end: time | None = None


@dataclass(slots=True, frozen=True)
class Course:

    id: int
    user_id: int
    course_code: str
    course_title: str
    instructor: str | None
    color_code: str | None
    schedule_day: str | None
    time_start: time | None
    time_end: time | None
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "course_code": self.course_code,
            "course_title": self.course_title,
            "instructor": self.instructor,
            "color_code": self.color_code,
            "schedule_day": self.schedule_day,
            "time_start": self.time_start.strftime("%H:%M") if self.time_start else None,
            "time_end": self.time_end.strftime("%H:%M") if self.time_end else None,
            "created_at": self.created_at.isoformat(),
        }
