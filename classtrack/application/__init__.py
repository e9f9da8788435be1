# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.users.check_auth import CheckAuthUseCase, GetProfileUseCase
from .use_cases.users.login_user import LoginResult, LoginUserUseCase
from .use_cases.users.logout_user import LogoutUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase, RegistrationInput
from .use_cases.users.resolve_token import ResolveSessionUseCase, ResolveTokenUseCase

__all__ = [
    "CheckAuthUseCase",
    "GetProfileUseCase",
    "LoginResult",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
    "RegistrationInput",
    "ResolveSessionUseCase",
    "ResolveTokenUseCase",
]
