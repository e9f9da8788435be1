# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from classtrack.domain.courses.entities import Course, CourseData
from classtrack.domain.courses.exceptions import CourseNotFoundError, DuplicateCourseCodeError
from classtrack.domain.courses.repositories import CourseRepository


class GetCourseUseCase:
    def __init__(self, *, courses: CourseRepository) -> None:
        self._courses = courses

    def execute(self, user_id: int, course_id: int) -> Course:
        course = self._courses.get(user_id, course_id)
        if course is None:
            raise CourseNotFoundError()
        return course


class CreateCourseUseCase:
    def __init__(self, *, courses: CourseRepository) -> None:
        self._courses = courses

    def execute(self, user_id: int, data: CourseData) -> Course:
        if self._courses.code_taken(user_id, data.course_code):
            raise DuplicateCourseCodeError()
        return self._courses.add(user_id, data)


class UpdateCourseUseCase:
    def __init__(self, *, courses: CourseRepository) -> None:
        self._courses = courses

    def execute(self, user_id: int, course_id: int, data: CourseData) -> Course:
        if self._courses.get(user_id, course_id) is None:
            raise CourseNotFoundError()
        if self._courses.code_taken(user_id, data.course_code, exclude_id=course_id):
            raise DuplicateCourseCodeError()
        updated = self._courses.update(user_id, course_id, data)
        if updated is None:
            raise CourseNotFoundError()
        return updated


class DeleteCourseUseCase:
    def __init__(self, *, courses: CourseRepository) -> None:
        self._courses = courses

    def execute(self, user_id: int, course_id: int) -> None:
        if not self._courses.delete(user_id, course_id):
            raise CourseNotFoundError()
