"""Plain result values handed back to callers once a unit of work has closed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from assettrack.models import ActionType, AssetStatus, ConditionStatus, TransitionRecord
from assettrack.models.base import ensure_utc


@dataclass(frozen=True)
class LedgerEntry:
    id: str
    asset_id: str
    person_id: str | None
    actor_id: str
    action: ActionType
    condition: ConditionStatus | None
    from_status: AssetStatus
    to_status: AssetStatus
    notes: str | None
    occurred_at: datetime
    recorded_at: datetime

    @classmethod
    def from_record(cls, record: TransitionRecord) -> "LedgerEntry":
        return cls(
            id=record.uuid,
            asset_id=record.asset.uuid,
            person_id=record.person.uuid if record.person is not None else None,
            actor_id=record.actor_id,
            action=record.action,
            condition=record.condition,
            from_status=record.from_status,
            to_status=record.to_status,
            notes=record.notes,
            occurred_at=ensure_utc(record.occurred_at),
            recorded_at=ensure_utc(record.recorded_at),
        )


@dataclass(frozen=True)
class TransitionResult:
    """Resulting status, the ledger entry written, and a human-readable description."""

    asset_id: str
    previous_status: AssetStatus
    status: AssetStatus
    holder_id: str | None
    description: str
    record: LedgerEntry


@dataclass(frozen=True)
class AssetActions:
    asset_id: str
    status: AssetStatus
    holder_id: str | None
    available_actions: tuple[ActionType, ...]


@dataclass(frozen=True)
class ConsistencyReport:
    """Ledger replay compared with the asset row's materialized status."""

    asset_id: str
    stored_status: AssetStatus
    replayed_status: AssetStatus | None
    entry_count: int
    error: str | None = None

    @property
    def consistent(self) -> bool:
        return self.error is None and self.replayed_status == self.stored_status
