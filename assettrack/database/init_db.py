"""Schema creation for local and test databases."""

from __future__ import annotations

import logging

from sqlalchemy import Engine

import assettrack.database.db as db_module
from assettrack.models import Base

logger = logging.getLogger(__name__)


def init_db(engine: Engine | None = None) -> None:
    """Create every table known to the model metadata if missing."""
    bind = engine or db_module.get_engine()
    Base.metadata.create_all(bind=bind)
    logger.info(
        "database.schema.ready",
        extra={"event": "database.schema.ready", "tables": sorted(Base.metadata.tables)},
    )
