"""SQLAlchemy model package for the asset lifecycle schema."""

from assettrack.models.asset import Asset
from assettrack.models.base import Base
from assettrack.models.enums import ActionType, AssetStatus, ConditionStatus
from assettrack.models.person import Person
from assettrack.models.transition_record import TransitionRecord

__all__ = [
    "ActionType",
    "Asset",
    "AssetStatus",
    "Base",
    "ConditionStatus",
    "Person",
    "TransitionRecord",
]
