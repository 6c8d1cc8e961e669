"""Read-only queries over the audit ledger."""

from __future__ import annotations

from datetime import datetime

from assettrack.core.exceptions import InvalidTransitionError
from assettrack.lifecycle.state_machine import ASSET_LIFECYCLE
from assettrack.models import ActionType, AssetStatus
from assettrack.repositories import AssetRepository, AuditLedger
from assettrack.services.base_service import BaseService
from assettrack.services.results import AssetActions, ConsistencyReport, LedgerEntry


class HistoryService(BaseService):
    """Serves asset history, ledger lookups and lifecycle consistency checks."""

    def history(self, asset_id: str) -> list[LedgerEntry]:
        with self.unit_of_work() as db:
            asset = AssetRepository(db).get(asset_id)
            return [LedgerEntry.from_record(record) for record in AuditLedger(db).history(asset)]

    def get_entry(self, record_id: str) -> LedgerEntry:
        with self.unit_of_work() as db:
            return LedgerEntry.from_record(AuditLedger(db).get(record_id))

    def list_entries(
        self,
        action: ActionType | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int = 50,
        offset: int = 0,
        search: str | None = None,
    ) -> tuple[list[LedgerEntry], int]:
        with self.unit_of_work() as db:
            records, total = AuditLedger(db).list_entries(
                action=action, start=start, end=end, limit=limit, offset=offset, search=search
            )
            return [LedgerEntry.from_record(record) for record in records], total

    def available_actions(self, asset_id: str) -> AssetActions:
        with self.unit_of_work() as db:
            asset = AssetRepository(db).get(asset_id)
            return AssetActions(
                asset_id=asset.uuid,
                status=asset.status,
                holder_id=asset.holder.uuid if asset.holder is not None else None,
                available_actions=ASSET_LIFECYCLE.available_actions(asset.status),
            )

    def verify(self, asset_id: str) -> ConsistencyReport:
        """Replay the ledger from ``available`` and compare with the stored status."""
        with self.unit_of_work() as db:
            asset = AssetRepository(db).get(asset_id)
            records = AuditLedger(db).in_commit_order(asset)

            status = AssetStatus.AVAILABLE
            error = None
            for record in records:
                if record.from_status != status:
                    error = (
                        f"Entry {record.uuid} starts from '{record.from_status.value}' "
                        f"but replay reached '{status.value}'"
                    )
                    break
                try:
                    status = ASSET_LIFECYCLE.assert_transition(status, record.action)
                except InvalidTransitionError as exc:
                    error = f"Entry {record.uuid}: {exc.message}"
                    break
                if record.to_status != status:
                    error = (
                        f"Entry {record.uuid} ends at '{record.to_status.value}' "
                        f"but '{record.action.value}' leads to '{status.value}'"
                    )
                    break

            return ConsistencyReport(
                asset_id=asset.uuid,
                stored_status=asset.status,
                replayed_status=None if error else status,
                entry_count=len(records),
                error=error,
            )
