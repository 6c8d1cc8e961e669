"""Canonical asset lifecycle transition table and pure helpers around it."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType

from assettrack.core.exceptions import InvalidTransitionError
from assettrack.models.enums import ActionType, AssetStatus, ConditionStatus


class HolderPolicy(str, enum.Enum):
    """What a transition does to the asset's custody pointer."""

    SET = "set"
    CLEAR = "clear"
    KEEP = "keep"


def _freeze(table: dict) -> Mapping:
    return MappingProxyType({key: MappingProxyType(dict(value)) for key, value in table.items()})


TRANSITIONS: Mapping[AssetStatus, Mapping[ActionType, AssetStatus]] = _freeze(
    {
        AssetStatus.AVAILABLE: {
            ActionType.CHECKOUT: AssetStatus.ASSIGNED,
            ActionType.REPAIR: AssetStatus.REPAIR,
            ActionType.DISPOSE: AssetStatus.RETIRED,
        },
        AssetStatus.ASSIGNED: {
            ActionType.CHECKIN: AssetStatus.AVAILABLE,
            ActionType.REPAIR: AssetStatus.REPAIR,
            ActionType.LOST: AssetStatus.MISSING,
        },
        AssetStatus.REPAIR: {
            ActionType.COMPLETE_REPAIR: AssetStatus.AVAILABLE,
            ActionType.DISPOSE: AssetStatus.RETIRED,
        },
        AssetStatus.MISSING: {
            ActionType.FOUND: AssetStatus.AVAILABLE,
            ActionType.DISPOSE: AssetStatus.RETIRED,
        },
        AssetStatus.RETIRED: {},
    }
)

TRANSITION_DESCRIPTIONS: Mapping[tuple[AssetStatus, AssetStatus], str] = MappingProxyType(
    {
        (AssetStatus.AVAILABLE, AssetStatus.ASSIGNED): "Asset checked out to employee",
        (AssetStatus.AVAILABLE, AssetStatus.REPAIR): "Asset sent for repair",
        (AssetStatus.AVAILABLE, AssetStatus.RETIRED): "Asset disposed/retired",
        (AssetStatus.ASSIGNED, AssetStatus.AVAILABLE): "Asset checked in (good condition)",
        (AssetStatus.ASSIGNED, AssetStatus.REPAIR): "Asset checked in (damaged, sent for repair)",
        (AssetStatus.ASSIGNED, AssetStatus.MISSING): "Asset reported lost/missing",
        (AssetStatus.REPAIR, AssetStatus.AVAILABLE): "Repair completed, asset available",
        (AssetStatus.REPAIR, AssetStatus.RETIRED): "Asset beyond repair, disposed",
        (AssetStatus.MISSING, AssetStatus.AVAILABLE): "Lost asset found and recovered",
        (AssetStatus.MISSING, AssetStatus.RETIRED): "Lost asset written off",
    }
)

HOLDER_POLICY: Mapping[ActionType, HolderPolicy] = MappingProxyType(
    {
        ActionType.CHECKOUT: HolderPolicy.SET,
        ActionType.CHECKIN: HolderPolicy.CLEAR,
        ActionType.REPAIR: HolderPolicy.KEEP,
        ActionType.COMPLETE_REPAIR: HolderPolicy.CLEAR,
        ActionType.LOST: HolderPolicy.KEEP,
        ActionType.FOUND: HolderPolicy.CLEAR,
        ActionType.DISPOSE: HolderPolicy.CLEAR,
    }
)

# Condition annotation written to the ledger when the caller reports none.
ACTION_CONDITIONS: Mapping[ActionType, ConditionStatus] = MappingProxyType(
    {
        ActionType.REPAIR: ConditionStatus.DAMAGED,
        ActionType.COMPLETE_REPAIR: ConditionStatus.GOOD,
        ActionType.LOST: ConditionStatus.LOST,
        ActionType.FOUND: ConditionStatus.GOOD,
    }
)

DEFAULT_NOTES: Mapping[ActionType, str] = MappingProxyType(
    {
        ActionType.COMPLETE_REPAIR: "Repair completed",
        ActionType.FOUND: "Asset recovered",
    }
)

CHECKIN_ACTIONS: Mapping[ConditionStatus, ActionType] = MappingProxyType(
    {
        ConditionStatus.GOOD: ActionType.CHECKIN,
        ConditionStatus.DAMAGED: ActionType.REPAIR,
        ConditionStatus.LOST: ActionType.LOST,
    }
)


class StateMachine:
    """Immutable lookup over a (status, action) -> status table."""

    def __init__(self, transitions: Mapping[AssetStatus, Mapping[ActionType, AssetStatus]]) -> None:
        self._transitions = transitions

    def can_transition(self, current: AssetStatus, action: ActionType) -> bool:
        return action in self._transitions.get(current, {})

    def next_status(self, current: AssetStatus, action: ActionType) -> AssetStatus | None:
        return self._transitions.get(current, {}).get(action)

    def available_actions(self, current: AssetStatus) -> tuple[ActionType, ...]:
        return tuple(self._transitions.get(current, {}))

    def assert_transition(self, current: AssetStatus, action: ActionType) -> AssetStatus:
        target = self.next_status(current, action)
        if target is None:
            raise InvalidTransitionError(current, action, self.available_actions(current))
        return target


ASSET_LIFECYCLE = StateMachine(TRANSITIONS)


def describe_transition(from_status: AssetStatus, to_status: AssetStatus) -> str:
    description = TRANSITION_DESCRIPTIONS.get((from_status, to_status))
    if description is not None:
        return description
    return f"Status changed from {_value(from_status)} to {_value(to_status)}"


def checkin_action(condition: ConditionStatus | str | None) -> ActionType:
    """Resolve the action a check-in turns into; unknown conditions check in."""
    try:
        resolved = ConditionStatus(condition)
    except ValueError:
        return ActionType.CHECKIN
    return CHECKIN_ACTIONS[resolved]


@dataclass(frozen=True)
class AssetState:
    """The mutable business fields of an asset, as a value."""

    status: AssetStatus
    holder_id: int | None = None


def plan_transition(
    state: AssetState,
    action: ActionType,
    next_status: AssetStatus,
    party_id: int | None = None,
) -> AssetState:
    """Compute the post-transition state; no I/O, no mutation of ``state``."""
    policy = HOLDER_POLICY[action]
    if policy is HolderPolicy.SET:
        if party_id is None:
            raise ValueError(f"Action '{action.value}' requires a receiving party.")
        holder_id = party_id
    elif policy is HolderPolicy.CLEAR:
        holder_id = None
    else:
        holder_id = state.holder_id
    return replace(state, status=next_status, holder_id=holder_id)


def _value(item: object) -> object:
    return getattr(item, "value", item)
