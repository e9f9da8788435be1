# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from classtrack.domain.courses.entities import Course as DomainCourse
from classtrack.domain.courses.entities import CourseData
from classtrack.domain.courses.exceptions import DuplicateCourseCodeError
from classtrack.domain.courses.repositories import CourseRepository
from classtrack.domain.notifications.entities import Notification as DomainNotification
from classtrack.domain.notifications.entities import NotificationType
from classtrack.domain.notifications.repositories import NotificationRepository
from classtrack.infrastructure.db.models import Course, Notification
from classtrack.infrastructure.db.session import session_scope
from classtrack.infrastructure.repositories.users.sqlalchemy_user_repository import as_utc

ScopeFactory = Callable[[], AbstractContextManager[Session]]


def _course_to_domain(row: Course) -> DomainCourse:
    return DomainCourse(
        id=row.id,
        user_id=row.user_id,
        course_code=row.course_code,
        course_title=row.course_title,
        instructor=row.instructor,
        color_code=row.color_code,
        schedule_day=row.schedule_day,
        time_start=row.time_start,
        time_end=row.time_end,
        created_at=as_utc(row.created_at),
    )


def _notification_to_domain(row: Notification) -> DomainNotification:
    return DomainNotification(
        id=row.id,
        user_id=row.user_id,
        title=row.title,
        message=row.message,
        type=NotificationType(row.type),
        is_read=bool(row.is_read),
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyCourseRepository(CourseRepository):
    def __init__(self, scope: ScopeFactory = session_scope):
        self._scope = scope

    def list_for_user(self, user_id: int, *, day: str | None = None) -> Sequence[DomainCourse]:
        with self._scope() as session:
            query = session.query(Course).filter(Course.user_id == user_id)
            if day is not None:
                query = query.filter(Course.schedule_day == day).order_by(
                    Course.time_start.asc()
                )
            else:
                query = query.order_by(Course.course_code.asc())
            return [_course_to_domain(row) for row in query.all()]

    def count_for_user(self, user_id: int) -> int:
        with self._scope() as session:
            return session.query(Course).filter(Course.user_id == user_id).count()

    def get(self, user_id: int, course_id: int) -> DomainCourse | None:
        with self._scope() as session:
            row = (
                session.query(Course)
                .filter(Course.id == course_id, Course.user_id == user_id)
                .first()
            )
            return _course_to_domain(row) if row else None

    def code_taken(self, user_id: int, course_code: str, *, exclude_id: int | None = None) -> bool:
        with self._scope() as session:
            query = session.query(Course.id).filter(
                Course.user_id == user_id, Course.course_code == course_code
            )
            if exclude_id is not None:
                query = query.filter(Course.id != exclude_id)
            return query.first() is not None

    def add(self, user_id: int, data: CourseData) -> DomainCourse:
        try:
            with self._scope() as session:
                row = Course(user_id=user_id, **_course_fields(data))
                session.add(row)
                session.flush()
                session.refresh(row)
                return _course_to_domain(row)
        except IntegrityError as exc:
            raise DuplicateCourseCodeError() from exc

    def update(self, user_id: int, course_id: int, data: CourseData) -> DomainCourse | None:
        try:
            with self._scope() as session:
                row = (
                    session.query(Course)
                    .filter(Course.id == course_id, Course.user_id == user_id)
                    .first()
                )
                if not row:
                    return None
                for field, value in _course_fields(data).items():
                    setattr(row, field, value)
                session.flush()
                return _course_to_domain(row)
        except IntegrityError as exc:
            raise DuplicateCourseCodeError() from exc

    def delete(self, user_id: int, course_id: int) -> bool:
        with self._scope() as session:
            deleted = (
                session.query(Course)
                .filter(Course.id == course_id, Course.user_id == user_id)
                .delete()
            )
            return deleted > 0


def _course_fields(data: CourseData) -> dict[str, object]:
    return {
        "course_code": data.course_code,
        "course_title": data.course_title,
        "instructor": data.instructor,
        "color_code": data.color_code,
        "schedule_day": data.schedule_day,
        "time_start": data.time_start,
        "time_end": data.time_end,
    }


class SqlAlchemyNotificationRepository(NotificationRepository):
    def __init__(self, scope: ScopeFactory = session_scope):
        self._scope = scope

    def add(
        self,
        user_id: int,
        title: str,
        message: str,
        type_: NotificationType = NotificationType.GENERAL,
    ) -> DomainNotification:
        with self._scope() as session:
            row = Notification(user_id=user_id, title=title, message=message, type=type_.value)
            session.add(row)
            session.flush()
            session.refresh(row)
            return _notification_to_domain(row)

    def list_for_user(
        self, user_id: int, limit: int | None = None
    ) -> Sequence[DomainNotification]:
        with self._scope() as session:
            query = (
                session.query(Notification)
                .filter(Notification.user_id == user_id)
                .order_by(Notification.created_at.desc(), Notification.id.desc())
            )
            if limit:
                query = query.limit(limit)
            return [_notification_to_domain(row) for row in query.all()]

    def mark_all_read(self, user_id: int) -> int:
        with self._scope() as session:
            result = session.execute(
                update(Notification)
                .where(Notification.user_id == user_id, Notification.is_read.is_(False))
                .values(is_read=True)
            )
            return int(result.rowcount or 0)
