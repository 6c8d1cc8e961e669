"""Canonical enum values for the asset lifecycle schema."""

from __future__ import annotations

import enum


class AssetStatus(str, enum.Enum):
    AVAILABLE = "available"
    ASSIGNED = "assigned"
    REPAIR = "repair"
    RETIRED = "retired"
    MISSING = "missing"


class ActionType(str, enum.Enum):
    CHECKOUT = "checkout"
    CHECKIN = "checkin"
    REPAIR = "repair"
    COMPLETE_REPAIR = "complete_repair"
    DISPOSE = "dispose"
    LOST = "lost"
    FOUND = "found"


class ConditionStatus(str, enum.Enum):
    GOOD = "good"
    DAMAGED = "damaged"
    LOST = "lost"


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """Persist enum values rather than member names."""
    return [member.value for member in enum_cls]
