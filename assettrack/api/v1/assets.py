"""Per-asset history and lifecycle endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from assettrack.core.dependencies import ActorContext, get_actor, get_history_service
from assettrack.schemas.assets import AssetActionsResponse, AssetHistoryResponse, ConsistencyResponse
from assettrack.schemas.transactions import LedgerEntryResponse
from assettrack.services.history_service import HistoryService

router = APIRouter(prefix="/assets", tags=["assets"])


@router.get("/{asset_id}/history", response_model=AssetHistoryResponse)
def asset_history(
    asset_id: str,
    actor: ActorContext = Depends(get_actor),
    history: HistoryService = Depends(get_history_service),
) -> AssetHistoryResponse:
    entries = history.history(asset_id)
    return AssetHistoryResponse(
        asset_id=asset_id,
        items=[LedgerEntryResponse.model_validate(entry) for entry in entries],
    )


@router.get("/{asset_id}/actions", response_model=AssetActionsResponse)
def asset_actions(
    asset_id: str,
    actor: ActorContext = Depends(get_actor),
    history: HistoryService = Depends(get_history_service),
) -> AssetActionsResponse:
    return AssetActionsResponse.model_validate(history.available_actions(asset_id))


@router.get("/{asset_id}/verify", response_model=ConsistencyResponse)
def verify_asset(
    asset_id: str,
    actor: ActorContext = Depends(get_actor),
    history: HistoryService = Depends(get_history_service),
) -> ConsistencyResponse:
    """Replay the asset's ledger and report whether it reaches the stored status."""
    return ConsistencyResponse.model_validate(history.verify(asset_id))
