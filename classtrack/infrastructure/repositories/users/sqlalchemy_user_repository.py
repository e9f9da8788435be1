# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from datetime import UTC, datetime, timedelta

from sqlalchemy import delete, or_
from sqlalchemy.exc import IntegrityError

from classtrack.domain.users.entities import NewUser
from classtrack.domain.users.entities import SessionToken as DomainSessionToken
from classtrack.domain.users.entities import User as DomainUser
from classtrack.domain.users.entities import UserStatus
from classtrack.domain.users.exceptions import UserAlreadyExistsError
from classtrack.domain.users.repositories import SessionTokenRepository, UserRepository
from classtrack.infrastructure.db.models import User, UserSession
from classtrack.infrastructure.db.session import session_scope
from classtrack.shared.logging import logger


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        first_name=row.first_name,
        last_name=row.last_name,
        program=row.program,
        year_level=row.year_level,
        status=UserStatus(row.status),
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_active_by_login(self, login: str) -> DomainUser | None:
        with session_scope() as session:
            row = (
                session.query(User)
                .filter(
                    or_(User.username == login, User.email == login),
                    User.status == UserStatus.ACTIVE.value,
                )
                .first()
            )
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def exists(self, *, username: str, email: str) -> bool:
        with session_scope() as session:
            found = (
                session.query(User.id)
                .filter(or_(User.username == username, User.email == email))
                .first()
            )
            return found is not None

    def add(self, user: NewUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    program=user.program,
                    year_level=user.year_level,
                    status=UserStatus.ACTIVE.value,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.warning(f"users.add: unique constraint rejected username={user.username}")
            raise UserAlreadyExistsError() from exc

    def set_status(self, user_id: int, status: UserStatus) -> bool:
        with session_scope() as session:
            row = session.get(User, user_id)
            if not row:
                return False
            row.status = status.value
            return True


class SqlAlchemySessionTokenRepository(SessionTokenRepository):
    def __init__(self, *, token_bytes: int = 32, ttl_days: int = 30) -> None:
        self._token_bytes = token_bytes
        self._ttl = timedelta(days=ttl_days)

    def issue(self, user_id: int) -> DomainSessionToken:
        with session_scope() as session:
            token_value = secrets.token_hex(self._token_bytes)
            expires_at = datetime.now(UTC) + self._ttl
            row = UserSession(user_id=user_id, session_token=token_value, expires_at=expires_at)
            session.add(row)
            return DomainSessionToken(user_id=user_id, token=token_value, expires_at=expires_at)

    def find_valid(self, token: str, now: datetime) -> DomainSessionToken | None:
        with session_scope() as session:
            row = (
                session.query(UserSession)
                .filter(
                    UserSession.session_token == token,
                    UserSession.expires_at > now,
                )
                .first()
            )
            if not row:
                return None
            return DomainSessionToken(
                user_id=row.user_id,
                token=row.session_token,
                expires_at=as_utc(row.expires_at),
            )

    def revoke_all_for_user(self, user_id: int) -> int:
        with session_scope() as session:
            result = session.execute(delete(UserSession).where(UserSession.user_id == user_id))
            return int(result.rowcount or 0)

    def purge_expired(self, now: datetime) -> int:
        with session_scope() as session:
            result = session.execute(delete(UserSession).where(UserSession.expires_at <= now))
            return int(result.rowcount or 0)

    def count_for_user(self, user_id: int) -> int:
        with session_scope() as session:
            return session.query(UserSession).filter(UserSession.user_id == user_id).count()
