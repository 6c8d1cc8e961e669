"""Asset lifecycle read schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from assettrack.models import ActionType, AssetStatus
from assettrack.schemas.transactions import LedgerEntryResponse


class AssetActionsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    asset_id: str
    status: AssetStatus
    holder_id: str | None = None
    available_actions: list[ActionType]


class AssetHistoryResponse(BaseModel):
    asset_id: str
    items: list[LedgerEntryResponse]


class ConsistencyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    asset_id: str
    stored_status: AssetStatus
    replayed_status: AssetStatus | None = None
    entry_count: int
    consistent: bool
    error: str | None = None
