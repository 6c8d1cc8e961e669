"""Dependency providers for API handlers."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Header

from assettrack.core.exceptions import AuthenticationError
from assettrack.services.history_service import HistoryService
from assettrack.services.transition_service import TransitionService


@dataclass(frozen=True)
class ActorContext:
    """Acting operator identity, established by the upstream authorization layer."""

    actor_id: str


def get_actor(x_actor_id: str | None = Header(default=None, alias="X-Actor-Id")) -> ActorContext:
    """Resolve the acting operator from headers set by the authorization proxy."""
    if x_actor_id is None or not x_actor_id.strip():
        raise AuthenticationError("X-Actor-Id header is required.")
    actor_id = x_actor_id.strip()
    if len(actor_id) > 64:
        raise AuthenticationError("X-Actor-Id header is too long.")
    return ActorContext(actor_id=actor_id)


def get_transition_service() -> TransitionService:
    """Create a transition coordinator bound to the active session factory."""
    return TransitionService()


def get_history_service() -> HistoryService:
    return HistoryService()
