from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest

from classtrack.domain.users.entities import NewUser, UserStatus
from classtrack.infrastructure.db import ENGINE, Base, SessionLocal
from classtrack.infrastructure.db.models import UserSession
from classtrack.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository, SqlAlchemyUserRepository)
from classtrack.scripts.manage import main


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def user_id() -> int:
    user = SqlAlchemyUserRepository().add(
        NewUser(
            username="alice",
            email="a@x.io",
            password_hash="scrypt:hash",
            first_name="Alice",
            last_name="Smith",
            program="BSCS",
            year_level="2",
        )
    )
    return user.id


def test_purge_sessions_removes_only_expired_rows(user_id: int) -> None:
    tokens = SqlAlchemySessionTokenRepository()
    live = tokens.issue(user_id)
    session = SessionLocal()
    try:
        session.add(
            UserSession(
                user_id=user_id,
                session_token="0" * 64,
                expires_at=datetime.now(UTC) - timedelta(days=1),
            )
        )
        session.commit()
    finally:
        session.close()

    assert main(["purge-sessions"]) == 0

    assert tokens.count_for_user(user_id) == 1
    assert tokens.find_valid(live.token, datetime.now(UTC)) is not None


def test_set_status_deactivates_and_revokes(user_id: int) -> None:
    tokens = SqlAlchemySessionTokenRepository()
    tokens.issue(user_id)

    assert main(["set-status", str(user_id), "suspended"]) == 0

    user = SqlAlchemyUserRepository().find_by_id(user_id)
    assert user is not None
    assert user.status is UserStatus.SUSPENDED
    assert tokens.count_for_user(user_id) == 0


def test_set_status_unknown_user_fails() -> None:
    assert main(["set-status", "999", "inactive"]) == 1
