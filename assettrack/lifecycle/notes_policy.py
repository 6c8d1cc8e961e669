"""Required-notes policy applied by callers before a transition is requested."""

from __future__ import annotations

from assettrack.core.exceptions import ValidationError
from assettrack.models.enums import ActionType, ConditionStatus

DEFAULT_NOTES_MAX_LENGTH = 1000

NOTES_REQUIRED_ACTIONS = frozenset({ActionType.REPAIR, ActionType.DISPOSE, ActionType.LOST})
NOTES_REQUIRED_CONDITIONS = frozenset({ConditionStatus.DAMAGED, ConditionStatus.LOST})


def sanitize_notes(value: str | None, max_len: int = DEFAULT_NOTES_MAX_LENGTH) -> str | None:
    """Strip NUL bytes and surrounding whitespace; empty becomes None."""
    if value is None:
        return None
    cleaned = str(value).replace("\x00", "").strip()
    if len(cleaned) > max_len:
        raise ValidationError(f"Notes cannot exceed {max_len} characters", field="notes")
    return cleaned or None


def notes_required(action: ActionType, condition: ConditionStatus | None = None) -> bool:
    if action is ActionType.CHECKIN:
        return condition in NOTES_REQUIRED_CONDITIONS
    return action in NOTES_REQUIRED_ACTIONS


def check_notes(
    action: ActionType,
    notes: str | None,
    condition: ConditionStatus | None = None,
    max_len: int = DEFAULT_NOTES_MAX_LENGTH,
) -> str | None:
    """Return normalized notes, or raise ``ValidationError`` when required ones are missing."""
    cleaned = sanitize_notes(notes, max_len=max_len)
    if cleaned is None and notes_required(action, condition):
        if action is ActionType.CHECKIN:
            message = "Notes are required when condition is damaged or lost"
        else:
            message = f"Notes are required for '{action.value}'"
        raise ValidationError(message, field="notes", action=action.value)
    return cleaned
