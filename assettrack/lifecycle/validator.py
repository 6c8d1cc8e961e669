"""Input validation and structured accept/reject decisions over the transition table."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from assettrack.core.exceptions import InvalidTransitionError, UnknownValueError
from assettrack.lifecycle.state_machine import ASSET_LIFECYCLE, StateMachine, describe_transition
from assettrack.models.enums import ActionType, AssetStatus


class RejectionReason(str, enum.Enum):
    UNKNOWN_STATUS = "unknown_status"
    UNKNOWN_ACTION = "unknown_action"
    ILLEGAL_TRANSITION = "illegal_transition"


@dataclass(frozen=True)
class TransitionDecision:
    """Outcome of validating one (status, action) pair."""

    current_status: AssetStatus | str
    action: ActionType | str
    next_status: AssetStatus | None = None
    description: str | None = None
    allowed_actions: tuple[ActionType, ...] = ()
    reason: RejectionReason | None = None
    error: str | None = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    def raise_for_rejection(self) -> None:
        if self.reason is RejectionReason.UNKNOWN_STATUS:
            raise UnknownValueError("current status", self.current_status)
        if self.reason is RejectionReason.UNKNOWN_ACTION:
            raise UnknownValueError("action", self.action)
        if self.reason is RejectionReason.ILLEGAL_TRANSITION:
            raise InvalidTransitionError(self.current_status, self.action, self.allowed_actions)


def _coerce(enum_cls: type[enum.Enum], value: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        return None


def validate_transition(
    current_status: AssetStatus | str,
    action: ActionType | str,
    machine: StateMachine = ASSET_LIFECYCLE,
) -> TransitionDecision:
    """Decide whether ``action`` is legal from ``current_status``. Never raises."""
    status = _coerce(AssetStatus, current_status)
    if status is None:
        return TransitionDecision(
            current_status=current_status,
            action=action,
            reason=RejectionReason.UNKNOWN_STATUS,
            error=f"Invalid current status: {current_status}",
        )

    resolved_action = _coerce(ActionType, action)
    if resolved_action is None:
        return TransitionDecision(
            current_status=status,
            action=action,
            allowed_actions=machine.available_actions(status),
            reason=RejectionReason.UNKNOWN_ACTION,
            error=f"Invalid action: {action}",
        )

    allowed = machine.available_actions(status)
    next_status = machine.next_status(status, resolved_action)
    if next_status is None:
        listed = ", ".join(item.value for item in allowed) if allowed else "none"
        return TransitionDecision(
            current_status=status,
            action=resolved_action,
            allowed_actions=allowed,
            reason=RejectionReason.ILLEGAL_TRANSITION,
            error=(
                f"Cannot perform '{resolved_action.value}' on asset with status '{status.value}'. "
                f"Available actions: {listed}"
            ),
        )

    return TransitionDecision(
        current_status=status,
        action=resolved_action,
        next_status=next_status,
        description=describe_transition(status, next_status),
        allowed_actions=allowed,
    )
