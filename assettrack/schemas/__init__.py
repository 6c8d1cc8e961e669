"""Pydantic schema package for API contracts."""

from assettrack.schemas.assets import AssetActionsResponse, AssetHistoryResponse, ConsistencyResponse
from assettrack.schemas.common import ErrorEnvelope
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
    TransitionRequest,
    TransitionResponse,
)

__all__ = [
    "AssetActionsResponse",
    "AssetHistoryResponse",
    "CheckinRequest",
    "CheckoutRequest",
    "CompleteRepairRequest",
    "ConsistencyResponse",
    "DisposeRequest",
    "ErrorEnvelope",
    "LedgerEntryResponse",
    "LedgerPage",
    "RepairRequest",
    "ReportFoundRequest",
    "ReportLostRequest",
    "TransitionRequest",
    "TransitionResponse",
]
