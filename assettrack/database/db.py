"""Database connection and session management."""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker

from assettrack.core.config import get_config

logger = logging.getLogger(__name__)

config = get_config()
DATABASE_URL = config.DATABASE_URL


def _enable_sqlite_write_locks(engine: Engine) -> None:
    """Open every SQLite transaction with BEGIN IMMEDIATE.

    SQLite ignores ``FOR UPDATE``; taking the write lock when the unit of work
    begins gives the same lock-then-read ordering, with the wait bounded by the
    driver's busy timeout.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record) -> None:
        # Hand transaction control to SQLAlchemy instead of pysqlite.
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(database_url: str, lock_timeout_seconds: float, echo: bool = False) -> Engine:
    """Create an engine whose lock waits are bounded by ``lock_timeout_seconds``."""
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"timeout": lock_timeout_seconds, "check_same_thread": False},
        )
        _enable_sqlite_write_locks(engine)
        return engine

    lock_timeout_ms = max(1, int(lock_timeout_seconds * 1000))
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_size=10,
        max_overflow=20,
        connect_args={"options": f"-c lock_timeout={lock_timeout_ms}"},
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


engine = build_engine(DATABASE_URL, config.LOCK_TIMEOUT_SECONDS, echo=config.DEBUG)
SessionLocal = build_session_factory(engine)


def get_engine() -> Engine:
    """Return the active SQLAlchemy engine."""
    return engine


def get_session_factory() -> sessionmaker[Session]:
    """Return the application session factory."""
    return SessionLocal


def get_active_database_url() -> str:
    """Return the currently bound database URL."""
    return DATABASE_URL


def verify_database_connection() -> bool:
    """Verify DB connectivity during startup."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as exc:  # pragma: no cover - exercised in deployment.
        logger.exception("database.connection_failed", extra={"event": "database.connection_failed"})
        logger.error("database.connection_failed.details: %s", exc)
        return False
