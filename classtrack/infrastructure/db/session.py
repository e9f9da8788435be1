# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from classtrack.shared.config import load_config
from classtrack.shared.config.settings import DatabaseConfig
from classtrack.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _sqlite_foreign_keys(dbapi_connection, _record) -> None:
    # SQLite ignores ON DELETE CASCADE unless enabled per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(db: DatabaseConfig) -> Engine:
    is_sqlite = db.url.startswith("sqlite")
    connect_args: dict[str, object] = (
        {"check_same_thread": False, "timeout": int(db.pool_timeout)} if is_sqlite else {}
    )
    engine = create_engine(
        db.url,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        pool_timeout=db.pool_timeout,
        connect_args=connect_args,
    )
    if is_sqlite:
        event.listen(engine, "connect", _sqlite_foreign_keys)
    return engine


ENGINE: Engine = build_engine(load_config().database)

SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, expire_on_commit=False)
)


_ACTIVE_SESSION: ContextVar[Session | None] = ContextVar("active_session", default=None)


@contextmanager
def session_scope() -> Iterator[Session]:
    """One unit of work: commit on success, roll back and re-raise on error.

    A scope opened inside another one joins it; only the outermost scope
    commits, so several repository calls can share a single transaction.
    """
    outer = _ACTIVE_SESSION.get()
    if outer is not None:
        yield outer
        return

    session = SessionLocal()
    marker = _ACTIVE_SESSION.set(session)
    try:
        yield session
        session.commit()
    except Exception:
        logger.exception("db.session: rolling back")
        session.rollback()
        raise
    finally:
        _ACTIVE_SESSION.reset(marker)
        session.close()
        SessionLocal.remove()


def init_db() -> None:
    from classtrack.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=ENGINE)
    logger.info(f"db: schema ensured on {ENGINE.url.render_as_string(hide_password=True)}")
