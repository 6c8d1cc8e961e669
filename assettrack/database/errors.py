"""Translation of SQLAlchemy failures into the application's error taxonomy."""

from __future__ import annotations

from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from assettrack.core.exceptions import AssetTrackException, ConcurrencyTimeoutError, PersistenceError

# SQLSTATE lock_not_available, raised when lock_timeout expires.
POSTGRES_LOCK_NOT_AVAILABLE = "55P03"
SQLITE_LOCKED_MESSAGES = ("database is locked", "database table is locked")


def is_lock_timeout(exc: SQLAlchemyError) -> bool:
    if not isinstance(exc, DBAPIError):
        return False
    driver_error = exc.orig
    sqlstate = getattr(driver_error, "pgcode", None) or getattr(driver_error, "sqlstate", None)
    if sqlstate == POSTGRES_LOCK_NOT_AVAILABLE:
        return True
    message = str(driver_error).lower()
    return any(fragment in message for fragment in SQLITE_LOCKED_MESSAGES)


def translate_db_error(exc: SQLAlchemyError) -> AssetTrackException:
    if is_lock_timeout(exc):
        return ConcurrencyTimeoutError("Timed out waiting for the asset lock; retry the request.")
    return PersistenceError(f"Database operation failed: {exc.__class__.__name__}")
