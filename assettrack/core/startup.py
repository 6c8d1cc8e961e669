"""Startup validation and bootstrap helpers."""

from __future__ import annotations

import logging

from assettrack.core.config import get_config
from assettrack.core.exceptions import ConfigurationError
from assettrack.core.logging_config import configure_logging
from assettrack.database.db import get_active_database_url, verify_database_connection
from assettrack.database.init_db import init_db

logger = logging.getLogger(__name__)


def validate_startup_config() -> bool:
    """Fail-fast config and connectivity checks; returns database reachability."""
    config = get_config()
    database_ok = verify_database_connection()
    active_database_url = get_active_database_url()
    if not database_ok and config.DB_CONNECTIVITY_REQUIRED:
        raise ConfigurationError("Database connectivity check failed.")
    if not database_ok:
        logger.warning(
            "startup.database.connectivity_optional_failed",
            extra={"event": "startup.database.connectivity_optional_failed"},
        )

    if config.is_production and active_database_url.startswith("sqlite"):
        logger.warning(
            "startup.production.sqlite_detected",
            extra={"event": "startup.production.sqlite_detected"},
        )

    logger.info(
        "startup.config.validated",
        extra={
            "event": "startup.config.validated",
            "env": config.ENV,
            "database_url_scheme": active_database_url.split("://", 1)[0],
            "db_connectivity_required": config.DB_CONNECTIVITY_REQUIRED,
            "lock_timeout_seconds": config.LOCK_TIMEOUT_SECONDS,
        },
    )
    return database_ok


def bootstrap() -> None:
    """Initialize logging, validate runtime configuration and create the schema."""
    configure_logging()
    database_ok = validate_startup_config()
    if database_ok and get_config().AUTO_CREATE_SCHEMA:
        init_db()
