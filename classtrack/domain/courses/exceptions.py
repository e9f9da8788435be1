# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from classtrack.shared.errors.base import DomainError


class CourseNotFoundError(DomainError):
    code = "course_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Course not found"


class DuplicateCourseCodeError(DomainError):
    code = "duplicate_course_code"
    status = HTTPStatus.CONFLICT
    message = "Course code already exists"
