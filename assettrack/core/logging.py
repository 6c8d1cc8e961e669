"""Structured logging helpers for transition events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

CONTEXT_FIELDS = (
    "actor_id",
    "asset_id",
    "action",
    "status",
    "error_code",
    "record_id",
)


@dataclass(frozen=True)
class LogContext:
    """Normalized context fields expected in structured logs."""

    actor_id: str | None = None
    asset_id: str | None = None
    action: str | None = None


def build_log_event(event: str, context: LogContext, **fields: Any) -> dict[str, Any]:
    """Build a normalized payload suitable for ``logger.<level>(..., extra=...)``."""
    payload: dict[str, Any] = {
        "event": event,
        "actor_id": context.actor_id,
        "asset_id": context.asset_id,
        "action": context.action,
    }
    payload.update(fields)
    return payload
