from __future__ import annotations

import pytest

from assettrack.core.exceptions import InvalidTransitionError, UnknownValueError
from assettrack.lifecycle.validator import RejectionReason, validate_transition
from assettrack.models import ActionType, AssetStatus


def test_accepts_legal_pair_with_description():
    decision = validate_transition("assigned", "lost")
    assert decision.accepted is True
    assert decision.next_status is AssetStatus.MISSING
    assert decision.description == "Asset reported lost/missing"
    decision.raise_for_rejection()


def test_rejects_illegal_pair_with_allowed_actions():
    decision = validate_transition(AssetStatus.AVAILABLE, ActionType.CHECKIN)
    assert decision.accepted is False
    assert decision.reason is RejectionReason.ILLEGAL_TRANSITION
    assert decision.allowed_actions == (ActionType.CHECKOUT, ActionType.REPAIR, ActionType.DISPOSE)
    assert decision.error == (
        "Cannot perform 'checkin' on asset with status 'available'. "
        "Available actions: checkout, repair, dispose"
    )
    with pytest.raises(InvalidTransitionError) as exc:
        decision.raise_for_rejection()
    assert exc.value.details["allowed_actions"] == ["checkout", "repair", "dispose"]


def test_unknown_status_is_distinguished_from_illegal():
    decision = validate_transition("stolen", ActionType.CHECKOUT)
    assert decision.reason is RejectionReason.UNKNOWN_STATUS
    assert decision.error == "Invalid current status: stolen"
    with pytest.raises(UnknownValueError) as exc:
        decision.raise_for_rejection()
    assert exc.value.field == "current status"


def test_unknown_action_is_distinguished_from_illegal():
    decision = validate_transition(AssetStatus.REPAIR, "teleport")
    assert decision.reason is RejectionReason.UNKNOWN_ACTION
    assert decision.allowed_actions == (ActionType.COMPLETE_REPAIR, ActionType.DISPOSE)
    with pytest.raises(UnknownValueError, match="Invalid action: teleport"):
        decision.raise_for_rejection()


def test_every_action_on_retired_is_rejected():
    for action in ActionType:
        decision = validate_transition(AssetStatus.RETIRED, action)
        assert decision.reason is RejectionReason.ILLEGAL_TRANSITION
        assert decision.allowed_actions == ()
