# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Maintenance commands for the session store and user accounts."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from datetime import UTC, datetime

from classtrack.domain.users.entities import UserStatus
from classtrack.infrastructure.db import init_db
from classtrack.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository, SqlAlchemyUserRepository)
from classtrack.shared.logging import logger


def purge_sessions(tokens: SqlAlchemySessionTokenRepository) -> int:
    removed = tokens.purge_expired(datetime.now(UTC))
    logger.info(f"manage.purge_sessions: removed={removed}")
    return removed


def set_user_status(
    users: SqlAlchemyUserRepository,
    tokens: SqlAlchemySessionTokenRepository,
    user_id: int,
    status: UserStatus,
) -> bool:
    if not users.set_status(user_id, status):
        return False
    revoked = 0
    if status is not UserStatus.ACTIVE:
        revoked = tokens.revoke_all_for_user(user_id)
    logger.info(f"manage.set_status: user_id={user_id} status={status} revoked={revoked}")
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="ClassTrack maintenance")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("purge-sessions", help="Delete expired session tokens")
    status_cmd = commands.add_parser("set-status", help="Change a user's account status")
    status_cmd.add_argument("user_id", type=int)
    status_cmd.add_argument("status", choices=[s.value for s in UserStatus])
    args = parser.parse_args(argv)

    init_db()
    tokens = SqlAlchemySessionTokenRepository()

    if args.command == "purge-sessions":
        print(f"Removed {purge_sessions(tokens)} expired session(s)")
        return 0

    users = SqlAlchemyUserRepository()
    if not set_user_status(users, tokens, args.user_id, UserStatus(args.status)):
        print(f"User {args.user_id} not found")
        return 1
    print(f"User {args.user_id} is now {args.status}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
