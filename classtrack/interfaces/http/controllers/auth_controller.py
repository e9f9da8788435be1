# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from classtrack.application.use_cases.users.check_auth import (CheckAuthUseCase,
                                                               GetProfileUseCase)
from classtrack.application.use_cases.users.login_user import LoginUserUseCase
from classtrack.application.use_cases.users.logout_user import LogoutUserUseCase
from classtrack.application.use_cases.users.register_user import RegisterUserUseCase
from classtrack.domain.users.exceptions import InvalidCredentialsError
from classtrack.infrastructure.observability import record_auth_event
from classtrack.interfaces.http.access_gate import (AuthContext, auth_required,
                                                    clear_session, current_auth,
                                                    establish_session)
from classtrack.interfaces.http.dto.auth import (AuthStatusDTO, LoginRequestDTO,
                                                 LoginSuccessDTO, MessageDTO,
                                                 RegisterRequestDTO)
from classtrack.interfaces.http.routing import ActionRouter
from classtrack.shared.errors import ValidationError as RequestValidationError
from classtrack.shared.errors.validation import (format_pydantic_errors,
                                                 raise_validation_error)
from classtrack.shared.logging import logger
from classtrack.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        check_auth_use_case: CheckAuthUseCase,
        profile_use_case: GetProfileUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._check_auth_use_case = check_auth_use_case
        self._profile_use_case = profile_use_case

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            record_auth_event("register", "invalid")
            raise_validation_error(exc)

        try:
            user = self._register_use_case.execute(dto.to_input())
        except Exception:
            record_auth_event("register", "failed")
            raise

        record_auth_event("register", "success")
        logger.info(f"auth.register: ok user_id={user.id}")
        payload = MessageDTO(message="Registration successful").model_dump()
        return jsonify(payload), 200

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            record_auth_event("login", "invalid")
            raise RequestValidationError(
                "Username and password required", context=format_pydantic_errors(exc)
            ) from exc

        try:
            result = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            record_auth_event("login", "rejected")
            logger.info("auth.login: rejected")
            raise

        establish_session(result.identity)
        record_auth_event("login", "success")
        logger.info(f"auth.login: ok user_id={result.user.id}")

        payload = LoginSuccessDTO(
            message="Login successful",
            user=result.user.public_profile(),
            token=result.token.token,
        ).model_dump()
        return jsonify(payload), 200

    def logout(self) -> tuple[Response, int]:
        context = current_auth()
        revoked = self._logout_use_case.execute(context.user_id)
        clear_session()
        record_auth_event("logout", "success")
        logger.info(f"auth.logout: ok user_id={context.user_id} revoked={revoked}")
        return jsonify(MessageDTO(message="Logout successful").model_dump()), 200

    def check(self) -> tuple[Response, int]:
        context = current_auth()
        user = self._check_auth_use_case.execute(context.user_id)
        if user is None:
            if context.is_authenticated:
                logger.info(f"auth.check: user_id={context.user_id} no longer active")
                clear_session()
            return jsonify(AuthStatusDTO(authenticated=False).model_dump(exclude_none=True)), 200

        payload = AuthStatusDTO(authenticated=True, user=user.public_profile()).model_dump()
        return jsonify(payload), 200

    @auth_required
    def profile(self, auth: AuthContext) -> tuple[Response, int]:
        user = self._profile_use_case.execute(auth.user_id)
        return jsonify({"success": True, "user": user.public_profile(include_created_at=True)}), 200

    def router(self) -> ActionRouter:
        return (
            ActionRouter("auth", "/api/auth")
            .post("register", self.register)
            .post("login", self.login)
            .post("logout", self.logout)
            .get("check", self.check)
            .get("profile", self.profile)
        )

    def as_blueprint(self) -> Blueprint:
        return self.router().as_blueprint()
