from __future__ import annotations

import pytest

from assettrack.core.exceptions import ValidationError
from assettrack.lifecycle.notes_policy import check_notes, notes_required, sanitize_notes
from assettrack.models import ActionType, ConditionStatus


def test_sanitize_strips_nul_bytes_and_whitespace():
    assert sanitize_notes("  cracked\x00 screen ") == "cracked screen"
    assert sanitize_notes("   ") is None
    assert sanitize_notes(None) is None


def test_sanitize_enforces_max_length():
    with pytest.raises(ValidationError, match="cannot exceed 5"):
        sanitize_notes("x" * 6, max_len=5)


@pytest.mark.parametrize("action", [ActionType.REPAIR, ActionType.DISPOSE, ActionType.LOST])
def test_notes_required_for_destructive_actions(action):
    assert notes_required(action) is True
    with pytest.raises(ValidationError):
        check_notes(action, "  ")


def test_checkin_requires_notes_only_for_damaged_or_lost():
    assert notes_required(ActionType.CHECKIN, ConditionStatus.GOOD) is False
    assert check_notes(ActionType.CHECKIN, None, condition=ConditionStatus.GOOD) is None
    with pytest.raises(ValidationError, match="condition is damaged or lost"):
        check_notes(ActionType.CHECKIN, None, condition=ConditionStatus.DAMAGED)


def test_optional_notes_pass_through_normalized():
    assert check_notes(ActionType.CHECKOUT, None) is None
    assert check_notes(ActionType.FOUND, " in the car park ") == "in the car park"
