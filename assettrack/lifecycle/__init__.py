"""Pure asset lifecycle rules: transition table, validator and notes policy."""

from assettrack.lifecycle.state_machine import (
    ASSET_LIFECYCLE,
    AssetState,
    StateMachine,
    checkin_action,
    describe_transition,
    plan_transition,
)
from assettrack.lifecycle.validator import RejectionReason, TransitionDecision, validate_transition

__all__ = [
    "ASSET_LIFECYCLE",
    "AssetState",
    "RejectionReason",
    "StateMachine",
    "TransitionDecision",
    "checkin_action",
    "describe_transition",
    "plan_transition",
    "validate_transition",
]
