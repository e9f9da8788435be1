# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from classtrack.application.services.password_hashing import \
    WerkzeugPasswordHasher
from classtrack.application.use_cases.courses.list_courses import (
    CountCoursesUseCase, ListCoursesUseCase, TodayScheduleUseCase)
from classtrack.application.use_cases.courses.manage_course import (
    CreateCourseUseCase, DeleteCourseUseCase, GetCourseUseCase,
    UpdateCourseUseCase)
from classtrack.application.use_cases.notifications.notifications import (
    ListNotificationsUseCase, MarkAllReadUseCase)
from classtrack.application.use_cases.users.check_auth import (
    CheckAuthUseCase, GetProfileUseCase)
from classtrack.application.use_cases.users.login_user import LoginUserUseCase
from classtrack.application.use_cases.users.logout_user import \
    LogoutUserUseCase
from classtrack.application.use_cases.users.register_user import \
    RegisterUserUseCase
from classtrack.application.use_cases.users.resolve_token import (
    ResolveSessionUseCase, ResolveTokenUseCase)
from classtrack.infrastructure.db import session_scope
from classtrack.infrastructure.repositories.sqlalchemy import (
    SqlAlchemyCourseRepository, SqlAlchemyNotificationRepository)
from classtrack.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository, SqlAlchemyUserRepository)
from classtrack.interfaces.http.controllers.auth_controller import \
    AuthController
from classtrack.interfaces.http.controllers.courses_controller import \
    CoursesController
from classtrack.interfaces.http.controllers.notifications_controller import \
    NotificationsController
from classtrack.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def session_token_repository(self) -> SqlAlchemySessionTokenRepository:
        return SqlAlchemySessionTokenRepository(
            token_bytes=self._config.auth.token_bytes,
            ttl_days=self._config.auth.token_ttl_days,
        )

    @cached_property
    def notification_repository(self) -> SqlAlchemyNotificationRepository:
        return SqlAlchemyNotificationRepository()

    @cached_property
    def course_repository(self) -> SqlAlchemyCourseRepository:
        return SqlAlchemyCourseRepository()

    # Auth use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            notifications=self.notification_repository,
            password_hasher=self.password_hasher,
            unit_of_work=session_scope,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_token_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(tokens=self.session_token_repository)

    @cached_property
    def check_auth_use_case(self) -> CheckAuthUseCase:
        return CheckAuthUseCase(users=self.user_repository)

    @cached_property
    def profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(users=self.user_repository)

    @cached_property
    def resolve_session_use_case(self) -> ResolveSessionUseCase:
        return ResolveSessionUseCase(users=self.user_repository)

    @cached_property
    def resolve_token_use_case(self) -> ResolveTokenUseCase:
        return ResolveTokenUseCase(
            users=self.user_repository, tokens=self.session_token_repository
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            check_auth_use_case=self.check_auth_use_case,
            profile_use_case=self.profile_use_case,
        )

    @cached_property
    def courses_controller(self) -> CoursesController:
        courses = self.course_repository
        return CoursesController(
            list_courses=ListCoursesUseCase(courses=courses),
            count_courses=CountCoursesUseCase(courses=courses),
            today_schedule=TodayScheduleUseCase(courses=courses),
            get_course=GetCourseUseCase(courses=courses),
            create_course=CreateCourseUseCase(courses=courses),
            update_course=UpdateCourseUseCase(courses=courses),
            delete_course=DeleteCourseUseCase(courses=courses),
        )

    @cached_property
    def notifications_controller(self) -> NotificationsController:
        return NotificationsController(
            list_notifications=ListNotificationsUseCase(
                notifications=self.notification_repository
            ),
            mark_all_read=MarkAllReadUseCase(notifications=self.notification_repository),
        )


container = Container()
