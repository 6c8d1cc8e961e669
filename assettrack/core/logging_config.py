"""JSON-lines logging for transition events and service diagnostics."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from assettrack.core.config import Config, get_config
from assettrack.core.logging import CONTEXT_FIELDS

# Library loggers held at WARNING in production.
QUIET_IN_PRODUCTION = ("sqlalchemy.engine", "uvicorn.access")


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON object; context fields appear only when set."""

    def __init__(self, context_fields: tuple[str, ...] = CONTEXT_FIELDS) -> None:
        super().__init__()
        self.context_fields = context_fields

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
        }
        for field in self.context_fields:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def build_handlers(config: Config) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.LOG_FILE:
        handlers.append(logging.FileHandler(config.LOG_FILE, encoding="utf-8"))
    formatter = JsonFormatter()
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(config: Config | None = None) -> None:
    """Attach JSON handlers to the root logger unless it already has handlers."""
    config = config or get_config()
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(config.LOG_LEVEL)
    for handler in build_handlers(config):
        root.addHandler(handler)

    if config.is_production:
        for name in QUIET_IN_PRODUCTION:
            logging.getLogger(name).setLevel(logging.WARNING)
