"""Append-only audit ledger entry for asset lifecycle transitions."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Integer, String, Text, event
from sqlalchemy.orm import Mapped, mapped_column, relationship

from assettrack.core.exceptions import PersistenceError
from assettrack.models.base import Base, new_uuid, utcnow
from assettrack.models.enums import ActionType, AssetStatus, ConditionStatus, enum_values


class TransitionRecord(Base):
    """Append-only table: no UPDATE, no DELETE."""

    __tablename__ = "transition_records"
    __table_args__ = (
        Index("idx_transition_records_asset_occurred", "asset_id", "occurred_at"),
        Index("idx_transition_records_action", "action"),
        Index("idx_transition_records_occurred", "occurred_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uuid: Mapped[str] = mapped_column(String(36), unique=True, nullable=False, default=new_uuid)
    asset_id: Mapped[int] = mapped_column(ForeignKey("assets.id", ondelete="RESTRICT"), nullable=False)
    person_id: Mapped[int | None] = mapped_column(ForeignKey("persons.id", ondelete="RESTRICT"), index=True)
    actor_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    action: Mapped[ActionType] = mapped_column(
        Enum(ActionType, name="action_type", values_callable=enum_values),
        nullable=False,
    )
    condition: Mapped[ConditionStatus | None] = mapped_column(
        Enum(ConditionStatus, name="condition_status", values_callable=enum_values),
    )
    from_status: Mapped[AssetStatus] = mapped_column(
        Enum(AssetStatus, name="asset_status", values_callable=enum_values),
        nullable=False,
    )
    to_status: Mapped[AssetStatus] = mapped_column(
        Enum(AssetStatus, name="asset_status", values_callable=enum_values),
        nullable=False,
    )
    notes: Mapped[str | None] = mapped_column(Text)
    occurred_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    recorded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    asset = relationship("Asset")
    person = relationship("Person")


@event.listens_for(TransitionRecord, "before_update")
def _refuse_update(mapper, connection, target: TransitionRecord) -> None:
    raise PersistenceError("Transition records are immutable.", record_id=target.uuid)


@event.listens_for(TransitionRecord, "before_delete")
def _refuse_delete(mapper, connection, target: TransitionRecord) -> None:
    raise PersistenceError("Transition records cannot be deleted.", record_id=target.uuid)
