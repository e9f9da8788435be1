# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Course, CourseData


class CourseRepository(Protocol):
    """Every method takes the owner id; rows of other users are never visible."""

    def list_for_user(self, user_id: int, *, day: str | None = None) -> Sequence[Course]: ...
    def count_for_user(self, user_id: int) -> int: ...
    def get(self, user_id: int, course_id: int) -> Course | None: ...
    def code_taken(self, user_id: int, course_code: str, *, exclude_id: int | None = None) -> bool: ...
    def add(self, user_id: int, data: CourseData) -> Course: ...
    def update(self, user_id: int, course_id: int, data: CourseData) -> Course | None: ...
    def delete(self, user_id: int, course_id: int) -> bool: ...
