"""Lifecycle action and ledger endpoints for API v1."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status

from assettrack.core.dependencies import ActorContext, get_actor, get_history_service, get_transition_service
from assettrack.models import ActionType
from assettrack.schemas.transactions import (
    CheckinRequest,
    CheckoutRequest,
    CompleteRepairRequest,
    DisposeRequest,
    LedgerEntryResponse,
    LedgerPage,
    RepairRequest,
    ReportFoundRequest,
    ReportLostRequest,
    TransitionResponse,
)
from assettrack.services.history_service import HistoryService
from assettrack.services.transition_service import TransitionService

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("/checkout", response_model=TransitionResponse, status_code=status.HTTP_201_CREATED)
def checkout_asset(
    payload: CheckoutRequest,
    actor: ActorContext = Depends(get_actor),
    service: TransitionService = Depends(get_transition_service),
) -> TransitionResponse:
    result = service.checkout(
        payload.asset_id,
        person_id=payload.person_id,
        actor_id=actor.actor_id,
        when=payload.transaction_date,
        notes=payload.notes,
    )
    return TransitionResponse.model_validate(result)


@router.post("/checkin", response_model=TransitionResponse, status_code=status.HTTP_201_CREATED)
def checkin_asset(
    payload: CheckinRequest,
    actor: ActorContext = Depends(get_actor),
    service: TransitionService = Depends(get_transition_service),
) -> TransitionResponse:
    result = service.checkin(
        payload.asset_id,
        condition=payload.condition_status,
        actor_id=actor.actor_id,
        when=payload.transaction_date,
        notes=payload.notes,
    )
    return TransitionResponse.model_validate(result)


@router.post("/repair", response_model=TransitionResponse, status_code=status.HTTP_201_CREATED)
def send_to_repair(
    payload: RepairRequest,
    actor: ActorContext = Depends(get_actor),
    service: TransitionService = Depends(get_transition_service),
) -> TransitionResponse:
    result = service.repair(payload.asset_id, actor_id=actor.actor_id, notes=payload.notes, when=payload.transaction_date)
    return TransitionResponse.model_validate(result)


@router.post("/complete-repair", response_model=TransitionResponse, status_code=status.HTTP_201_CREATED)
def complete_repair(
    payload: CompleteRepairRequest,
    actor: ActorContext = Depends(get_actor),
    service: TransitionService = Depends(get_transition_service),
) -> TransitionResponse:
    result = service.complete_repair(
        payload.asset_id, actor_id=actor.actor_id, when=payload.transaction_date, notes=payload.notes
    )
    return TransitionResponse.model_validate(result)


@router.post("/report-lost", response_model=TransitionResponse, status_code=status.HTTP_201_CREATED)
def report_lost(
    payload: ReportLostRequest,
    actor: ActorContext = Depends(get_actor),
    service: TransitionService = Depends(get_transition_service),
) -> TransitionResponse:
    result = service.report_lost(
        payload.asset_id, actor_id=actor.actor_id, notes=payload.notes, when=payload.transaction_date
    )
    return TransitionResponse.model_validate(result)


@router.post("/report-found", response_model=TransitionResponse, status_code=status.HTTP_201_CREATED)
def report_found(
    payload: ReportFoundRequest,
    actor: ActorContext = Depends(get_actor),
    service: TransitionService = Depends(get_transition_service),
) -> TransitionResponse:
    result = service.report_found(
        payload.asset_id, actor_id=actor.actor_id, when=payload.transaction_date, notes=payload.notes
    )
    return TransitionResponse.model_validate(result)


@router.post("/dispose", response_model=TransitionResponse, status_code=status.HTTP_201_CREATED)
def dispose_asset(
    payload: DisposeRequest,
    actor: ActorContext = Depends(get_actor),
    service: TransitionService = Depends(get_transition_service),
) -> TransitionResponse:
    result = service.dispose(payload.asset_id, actor_id=actor.actor_id, notes=payload.notes, when=payload.transaction_date)
    return TransitionResponse.model_validate(result)


@router.get("", response_model=LedgerPage)
def list_transactions(
    action_type: ActionType | None = Query(default=None),
    start_date: datetime | None = Query(default=None),
    end_date: datetime | None = Query(default=None),
    limit: int = Query(default=20, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    search: str | None = Query(default=None, max_length=100),
    actor: ActorContext = Depends(get_actor),
    history: HistoryService = Depends(get_history_service),
) -> LedgerPage:
    entries, total = history.list_entries(
        action=action_type, start=start_date, end=end_date, limit=limit, offset=offset, search=search
    )
    return LedgerPage(
        items=[LedgerEntryResponse.model_validate(entry) for entry in entries],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/{record_id}", response_model=LedgerEntryResponse)
def get_transaction(
    record_id: str,
    actor: ActorContext = Depends(get_actor),
    history: HistoryService = Depends(get_history_service),
) -> LedgerEntryResponse:
    return LedgerEntryResponse.model_validate(history.get_entry(record_id))
