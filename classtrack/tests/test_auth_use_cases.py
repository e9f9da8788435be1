from __future__ import annotations

from contextlib import contextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from classtrack.application.use_cases.users.check_auth import (CheckAuthUseCase,
                                                               GetProfileUseCase)
from classtrack.application.use_cases.users.login_user import LoginUserUseCase
from classtrack.application.use_cases.users.logout_user import LogoutUserUseCase
from classtrack.application.use_cases.users.register_user import (RegisterUserUseCase,
                                                                  RegistrationInput)
from classtrack.application.use_cases.users.resolve_token import (ResolveSessionUseCase,
                                                               ResolveTokenUseCase)
from classtrack.domain.notifications.entities import (WELCOME_MESSAGE, WELCOME_TITLE,
                                                      NotificationType)
from classtrack.domain.users.entities import NewUser, SessionToken, User, UserStatus
from classtrack.domain.users.exceptions import (InvalidCredentialsError,
                                                UserAlreadyExistsError,
                                                UserNotFoundError)
from classtrack.domain.users.repositories import (PasswordHasher, SessionTokenRepository,
                                                  UserRepository)


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_active_by_login(self, login: str) -> User | None:
        for user in self._users.values():
            if login in (user.username, user.email) and user.is_active:
                return user
        return None

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def exists(self, *, username: str, email: str) -> bool:
        return any(u.username == username or u.email == email for u in self._users.values())

    def add(self, user: NewUser) -> User:
        new_user = User(
            id=self._seq,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            first_name=user.first_name,
            last_name=user.last_name,
            program=user.program,
            year_level=user.year_level,
            status=UserStatus.ACTIVE,
            created_at=datetime.now(UTC),
        )
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def set_status(self, user_id: int, status: UserStatus) -> None:
        self._users[user_id] = replace(self._users[user_id], status=status)


class InMemoryTokenRepository(SessionTokenRepository):
    def __init__(self, ttl: timedelta = timedelta(days=30)) -> None:
        self.tokens: list[SessionToken] = []
        self._ttl = ttl
        self._seq = 0

    def issue(self, user_id: int) -> SessionToken:
        self._seq += 1
        token = SessionToken(
            user_id=user_id,
            token=f"token-{user_id}-{self._seq}",
            expires_at=datetime.now(UTC) + self._ttl,
        )
        self.tokens.append(token)
        return token

    def find_valid(self, token: str, now: datetime) -> SessionToken | None:
        for item in self.tokens:
            if item.token == token and not item.is_expired(now):
                return item
        return None

    def revoke_all_for_user(self, user_id: int) -> int:
        before = len(self.tokens)
        self.tokens = [t for t in self.tokens if t.user_id != user_id]
        return before - len(self.tokens)

    def purge_expired(self, now: datetime) -> int:
        before = len(self.tokens)
        self.tokens = [t for t in self.tokens if not t.is_expired(now)]
        return before - len(self.tokens)


class InMemoryNotificationRepository:
    def __init__(self) -> None:
        self.added: list[tuple[int, str, str, NotificationType]] = []

    def add(self, user_id: int, title: str, message: str, type_: NotificationType) -> None:
        self.added.append((user_id, title, message, type_))


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verify_calls = 0

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls += 1
        return hashed == f"hashed:{password}"


def _alice(**overrides: str) -> RegistrationInput:
    fields = {
        "username": "alice",
        "email": "a@x.io",
        "password": "secret123",
        "first_name": "Alice",
        "last_name": "Smith",
        "program": "BSCS",
        "year_level": "2",
    }
    fields.update(overrides)
    return RegistrationInput(**fields)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> InMemoryTokenRepository:
    return InMemoryTokenRepository()


@pytest.fixture()
def notifications() -> InMemoryNotificationRepository:
    return InMemoryNotificationRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def register(users, notifications, hasher) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, notifications=notifications, password_hasher=hasher)


@pytest.fixture()
def login(users, tokens, hasher) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=tokens, password_hasher=hasher)


def test_register_user_stores_hash_and_welcomes(register, users, notifications) -> None:
    user = register.execute(_alice())

    assert user.id == 1
    assert user.password_hash == "hashed:secret123"
    assert user.status is UserStatus.ACTIVE
    assert users.find_by_id(1) is not None
    assert notifications.added == [
        (1, WELCOME_TITLE, WELCOME_MESSAGE, NotificationType.GENERAL)
    ]


def test_register_rejects_duplicate_username_or_email(register) -> None:
    register.execute(_alice())

    with pytest.raises(UserAlreadyExistsError):
        register.execute(_alice(email="other@x.io"))
    with pytest.raises(UserAlreadyExistsError):
        register.execute(_alice(username="alice2"))


def test_login_by_username_or_email_issues_token(register, login) -> None:
    register.execute(_alice())

    by_name = login.execute("alice", "secret123")
    by_email = login.execute("a@x.io", "secret123")

    assert by_name.user.id == by_email.user.id == 1
    assert by_name.token.token != by_email.token.token
    assert by_name.identity.display_name == "Alice Smith"


def test_login_failures_are_indistinguishable(register, login, hasher) -> None:
    register.execute(_alice())

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice", "wrong")
    calls_after_wrong_password = hasher.verify_calls

    with pytest.raises(InvalidCredentialsError) as unknown_user:
        login.execute("nobody", "secret123")

    assert wrong_password.value.message == unknown_user.value.message == "Invalid credentials"
    assert wrong_password.value.status == unknown_user.value.status == 401
    # The unknown user still pays for one password verification.
    assert hasher.verify_calls == calls_after_wrong_password + 1


def test_login_rejects_inactive_user(register, login, users) -> None:
    user = register.execute(_alice())
    users.set_status(user.id, UserStatus.SUSPENDED)

    with pytest.raises(InvalidCredentialsError):
        login.execute("alice", "secret123")


def test_logout_revokes_every_token_of_the_user(register, login, tokens) -> None:
    register.execute(_alice())
    for _ in range(3):
        login.execute("alice", "secret123")
    tokens.issue(99)

    revoked = LogoutUserUseCase(tokens=tokens).execute(1)

    assert revoked == 3
    assert [t.user_id for t in tokens.tokens] == [99]


def test_logout_is_idempotent_and_accepts_anonymous(tokens) -> None:
    use_case = LogoutUserUseCase(tokens=tokens)

    assert use_case.execute(None) == 0
    assert use_case.execute(1) == 0


def test_check_auth_requires_active_user(register, users) -> None:
    user = register.execute(_alice())
    check = CheckAuthUseCase(users=users)

    assert check.execute(None) is None
    assert check.execute(user.id) == user

    users.set_status(user.id, UserStatus.INACTIVE)
    assert check.execute(user.id) is None


def test_get_profile_raises_for_unknown_user(users) -> None:
    with pytest.raises(UserNotFoundError):
        GetProfileUseCase(users=users).execute(42)


def test_resolve_token_honours_expiry_and_status(register, login, users, tokens) -> None:
    register.execute(_alice())
    result = login.execute("alice", "secret123")

    now = datetime.now(UTC)
    resolve = ResolveTokenUseCase(users=users, tokens=tokens, clock=lambda: now)
    identity = resolve.execute(result.token.token)
    assert identity is not None
    assert identity.user_id == 1
    assert resolve.execute("") is None
    assert resolve.execute("missing") is None

    later = ResolveTokenUseCase(
        users=users, tokens=tokens, clock=lambda: now + timedelta(days=31)
    )
    assert later.execute(result.token.token) is None

    users.set_status(1, UserStatus.INACTIVE)
    assert resolve.execute(result.token.token) is None


def test_resolve_session_drops_inactive_owner(register, users) -> None:
    user = register.execute(_alice())
    resolve = ResolveSessionUseCase(users=users)

    identity = resolve.execute(user.id)
    assert identity is not None
    assert identity.display_name == "Alice Smith"
    assert resolve.execute(42) is None

    users.set_status(user.id, UserStatus.INACTIVE)
    assert resolve.execute(user.id) is None


class FailingNotificationRepository(InMemoryNotificationRepository):
    def add(self, user_id: int, title: str, message: str, type_: NotificationType) -> None:
        raise RuntimeError("notifications table unavailable")


def test_register_runs_both_writes_in_one_unit_of_work(users, hasher) -> None:
    events: list[str] = []

    @contextmanager
    def unit_of_work():
        events.append("begin")
        try:
            yield
        except Exception:
            events.append("rollback")
            raise
        events.append("commit")

    use_case = RegisterUserUseCase(
        users=users,
        notifications=FailingNotificationRepository(),
        password_hasher=hasher,
        unit_of_work=unit_of_work,
    )

    with pytest.raises(RuntimeError):
        use_case.execute(_alice())

    assert events == ["begin", "rollback"]
