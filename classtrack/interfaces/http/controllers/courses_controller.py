# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from classtrack.application.use_cases.courses.list_courses import (CountCoursesUseCase,
                                                                   ListCoursesUseCase,
                                                                   TodayScheduleUseCase)
from classtrack.application.use_cases.courses.manage_course import (CreateCourseUseCase,
                                                                    DeleteCourseUseCase,
                                                                    GetCourseUseCase,
                                                                    UpdateCourseUseCase)
from classtrack.interfaces.http.access_gate import AuthContext, auth_required
from classtrack.interfaces.http.dto.courses import CourseRequestDTO
from classtrack.interfaces.http.routing import ActionRouter
from classtrack.shared.errors import ValidationError as RequestValidationError
from classtrack.shared.errors.validation import raise_validation_error
from classtrack.shared.logging import logger


def _course_id() -> int:
    raw = request.args.get("id", "")
    if not raw.isdigit():
        raise RequestValidationError("Course id is required", code="course_id_invalid")
    return int(raw)


def _course_payload() -> CourseRequestDTO:
    try:
        return CourseRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)
        raise


class CoursesController:
    def __init__(
        self,
        *,
        list_courses: ListCoursesUseCase,
        count_courses: CountCoursesUseCase,
        today_schedule: TodayScheduleUseCase,
        get_course: GetCourseUseCase,
        create_course: CreateCourseUseCase,
        update_course: UpdateCourseUseCase,
        delete_course: DeleteCourseUseCase,
    ) -> None:
        self._list = list_courses
        self._count = count_courses
        self._today = today_schedule
        self._get = get_course
        self._create = create_course
        self._update = update_course
        self._delete = delete_course

    @auth_required
    def list_courses(self, auth: AuthContext):
        courses = self._list.execute(auth.user_id)
        return jsonify({"success": True, "courses": [c.to_dict() for c in courses]})

    @auth_required
    def count(self, auth: AuthContext):
        return jsonify({"success": True, "count": self._count.execute(auth.user_id)})

    @auth_required
    def today_schedule(self, auth: AuthContext):
        schedule = self._today.execute(auth.user_id)
        return jsonify({"success": True, "schedule": [c.to_dict() for c in schedule]})

    @auth_required
    def get_course(self, auth: AuthContext):
        course = self._get.execute(auth.user_id, _course_id())
        return jsonify({"success": True, "course": course.to_dict()})

    @auth_required
    def create(self, auth: AuthContext):
        dto = _course_payload()
        course = self._create.execute(auth.user_id, dto.to_data())
        logger.info(f"courses.create: ok user_id={auth.user_id} course_id={course.id}")
        return jsonify(
            {"success": True, "message": "Course created successfully", "course": course.to_dict()}
        )

    @auth_required
    def update(self, auth: AuthContext):
        course_id = _course_id()
        dto = _course_payload()
        course = self._update.execute(auth.user_id, course_id, dto.to_data())
        logger.info(f"courses.update: ok user_id={auth.user_id} course_id={course_id}")
        return jsonify(
            {"success": True, "message": "Course updated successfully", "course": course.to_dict()}
        )

    @auth_required
    def delete(self, auth: AuthContext):
        course_id = _course_id()
        self._delete.execute(auth.user_id, course_id)
        logger.info(f"courses.delete: ok user_id={auth.user_id} course_id={course_id}")
        return jsonify({"success": True, "message": "Course deleted successfully"})

    def router(self) -> ActionRouter:
        return (
            ActionRouter("courses", "/api/courses")
            .get("list", self.list_courses)
            .get("count", self.count)
            .get("today-schedule", self.today_schedule)
            .get("get", self.get_course)
            .post("create", self.create)
            .put("update", self.update)
            .delete("delete", self.delete)
        )

    def as_blueprint(self) -> Blueprint:
        return self.router().as_blueprint()
