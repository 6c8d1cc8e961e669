"""Append-only persistence gateway for transition records."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session, selectinload

from assettrack.core.exceptions import NotFoundError
from assettrack.models import ActionType, Asset, TransitionRecord
from assettrack.models.base import ensure_utc


class AuditLedger:
    """Appends and reads ledger entries; exposes no update or delete path."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def append(self, record: TransitionRecord) -> TransitionRecord:
        self.db.add(record)
        self.db.flush()
        return record

    def history(self, asset: Asset) -> list[TransitionRecord]:
        stmt = (
            self._with_relations(select(TransitionRecord))
            .where(TransitionRecord.asset_id == asset.id)
            .order_by(TransitionRecord.occurred_at, TransitionRecord.id)
        )
        return list(self.db.execute(stmt).scalars())

    def in_commit_order(self, asset: Asset) -> list[TransitionRecord]:
        stmt = select(TransitionRecord).where(TransitionRecord.asset_id == asset.id).order_by(TransitionRecord.id)
        return list(self.db.execute(stmt).scalars())

    def get(self, record_id: str) -> TransitionRecord:
        stmt = self._with_relations(select(TransitionRecord)).where(TransitionRecord.uuid == record_id)
        record = self.db.execute(stmt).scalar_one_or_none()
        if record is None:
            raise NotFoundError("Transaction", record_id)
        return record

    def list_entries(
        self,
        action: ActionType | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int = 50,
        offset: int = 0,
        search: str | None = None,
    ) -> tuple[list[TransitionRecord], int]:
        """Newest first; ``search`` matches asset name, tag or serial number."""
        filters = []
        if action is not None:
            filters.append(TransitionRecord.action == action)
        if start is not None:
            filters.append(TransitionRecord.occurred_at >= ensure_utc(start))
        if end is not None:
            filters.append(TransitionRecord.occurred_at <= ensure_utc(end))
        if search and search.strip():
            pattern = f"%{search.strip()}%"
            matching_assets = select(Asset.id).where(
                or_(
                    Asset.name.ilike(pattern),
                    Asset.asset_tag.ilike(pattern),
                    Asset.serial_number.ilike(pattern),
                )
            )
            filters.append(TransitionRecord.asset_id.in_(matching_assets))

        count_stmt = select(func.count(TransitionRecord.id))
        stmt = self._with_relations(select(TransitionRecord))
        if filters:
            count_stmt = count_stmt.where(*filters)
            stmt = stmt.where(*filters)

        total = self.db.execute(count_stmt).scalar_one()
        stmt = (
            stmt.order_by(TransitionRecord.occurred_at.desc(), TransitionRecord.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(self.db.execute(stmt).scalars()), total

    @staticmethod
    def _with_relations(stmt: Select) -> Select:
        return stmt.options(selectinload(TransitionRecord.asset), selectinload(TransitionRecord.person))
