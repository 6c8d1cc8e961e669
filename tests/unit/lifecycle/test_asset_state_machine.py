from __future__ import annotations

import pytest

from assettrack.core.exceptions import InvalidTransitionError
from assettrack.lifecycle.state_machine import (
    ASSET_LIFECYCLE,
    TRANSITIONS,
    AssetState,
    checkin_action,
    describe_transition,
    plan_transition,
)
from assettrack.models import ActionType, AssetStatus, ConditionStatus

EXPECTED_TABLE = {
    (AssetStatus.AVAILABLE, ActionType.CHECKOUT): AssetStatus.ASSIGNED,
    (AssetStatus.AVAILABLE, ActionType.REPAIR): AssetStatus.REPAIR,
    (AssetStatus.AVAILABLE, ActionType.DISPOSE): AssetStatus.RETIRED,
    (AssetStatus.ASSIGNED, ActionType.CHECKIN): AssetStatus.AVAILABLE,
    (AssetStatus.ASSIGNED, ActionType.REPAIR): AssetStatus.REPAIR,
    (AssetStatus.ASSIGNED, ActionType.LOST): AssetStatus.MISSING,
    (AssetStatus.REPAIR, ActionType.COMPLETE_REPAIR): AssetStatus.AVAILABLE,
    (AssetStatus.REPAIR, ActionType.DISPOSE): AssetStatus.RETIRED,
    (AssetStatus.MISSING, ActionType.FOUND): AssetStatus.AVAILABLE,
    (AssetStatus.MISSING, ActionType.DISPOSE): AssetStatus.RETIRED,
}


def test_table_matches_lifecycle_for_every_pair():
    for status in AssetStatus:
        for action in ActionType:
            expected = EXPECTED_TABLE.get((status, action))
            assert ASSET_LIFECYCLE.next_status(status, action) == expected
            assert ASSET_LIFECYCLE.can_transition(status, action) is (expected is not None)


def test_retired_is_terminal():
    assert ASSET_LIFECYCLE.available_actions(AssetStatus.RETIRED) == ()
    with pytest.raises(InvalidTransitionError) as exc:
        ASSET_LIFECYCLE.assert_transition(AssetStatus.RETIRED, ActionType.FOUND)
    assert exc.value.allowed_actions == ()
    assert "Available actions: none" in exc.value.message


def test_table_is_read_only():
    with pytest.raises(TypeError):
        TRANSITIONS[AssetStatus.RETIRED] = {}
    with pytest.raises(TypeError):
        TRANSITIONS[AssetStatus.AVAILABLE][ActionType.FOUND] = AssetStatus.AVAILABLE


def test_available_actions_keep_table_order():
    assert ASSET_LIFECYCLE.available_actions(AssetStatus.AVAILABLE) == (
        ActionType.CHECKOUT,
        ActionType.REPAIR,
        ActionType.DISPOSE,
    )


def test_descriptions_and_fallback():
    assert describe_transition(AssetStatus.MISSING, AssetStatus.RETIRED) == "Lost asset written off"
    assert describe_transition(AssetStatus.RETIRED, AssetStatus.AVAILABLE) == (
        "Status changed from retired to available"
    )


@pytest.mark.parametrize(
    ("condition", "action"),
    [
        (ConditionStatus.GOOD, ActionType.CHECKIN),
        ("damaged", ActionType.REPAIR),
        ("lost", ActionType.LOST),
        ("scratched", ActionType.CHECKIN),
        (None, ActionType.CHECKIN),
    ],
)
def test_checkin_condition_resolution(condition, action):
    assert checkin_action(condition) is action


def test_plan_transition_applies_holder_policy():
    assigned = AssetState(status=AssetStatus.ASSIGNED, holder_id=7)

    assert plan_transition(AssetState(AssetStatus.AVAILABLE), ActionType.CHECKOUT, AssetStatus.ASSIGNED, 7) == assigned
    assert plan_transition(assigned, ActionType.CHECKIN, AssetStatus.AVAILABLE).holder_id is None
    assert plan_transition(assigned, ActionType.REPAIR, AssetStatus.REPAIR).holder_id == 7
    assert plan_transition(assigned, ActionType.LOST, AssetStatus.MISSING).holder_id == 7

    missing = AssetState(status=AssetStatus.MISSING, holder_id=7)
    assert plan_transition(missing, ActionType.FOUND, AssetStatus.AVAILABLE).holder_id is None
    assert plan_transition(missing, ActionType.DISPOSE, AssetStatus.RETIRED).holder_id is None


def test_plan_transition_does_not_mutate_input_and_requires_party_for_checkout():
    state = AssetState(status=AssetStatus.AVAILABLE)
    with pytest.raises(ValueError, match="requires a receiving party"):
        plan_transition(state, ActionType.CHECKOUT, AssetStatus.ASSIGNED)
    plan_transition(state, ActionType.REPAIR, AssetStatus.REPAIR)
    assert state == AssetState(status=AssetStatus.AVAILABLE)
