# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date

from classtrack.domain.courses.entities import WEEKDAYS, Course
from classtrack.domain.courses.repositories import CourseRepository


class ListCoursesUseCase:
    def __init__(self, *, courses: CourseRepository) -> None:
        self._courses = courses

    def execute(self, user_id: int) -> Sequence[Course]:
        return self._courses.list_for_user(user_id)


class CountCoursesUseCase:
    def __init__(self, *, courses: CourseRepository) -> None:
        self._courses = courses

    def execute(self, user_id: int) -> int:
        return self._courses.count_for_user(user_id)


class TodayScheduleUseCase:
    def __init__(
        self,
        *,
        courses: CourseRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._courses = courses
        self._today = today

    def execute(self, user_id: int) -> Sequence[Course]:
        weekday = WEEKDAYS[self._today().weekday()]
        return self._courses.list_for_user(user_id, day=weekday)
