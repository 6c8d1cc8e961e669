"""Transition request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from assettrack.core.config import get_config
from assettrack.lifecycle.notes_policy import check_notes
from assettrack.models import ActionType, AssetStatus, ConditionStatus


class TransitionRequest(BaseModel):
    """Fields shared by every lifecycle action request."""

    action: ClassVar[ActionType]

    asset_id: str = Field(min_length=1, max_length=36)
    transaction_date: datetime | None = None
    notes: str | None = None

    def _condition(self) -> ConditionStatus | None:
        return None

    @model_validator(mode="after")
    def _apply_notes_policy(self):
        self.notes = check_notes(
            self.action,
            self.notes,
            condition=self._condition(),
            max_len=get_config().NOTES_MAX_LENGTH,
        )
        return self


class CheckoutRequest(TransitionRequest):
    action: ClassVar[ActionType] = ActionType.CHECKOUT

    person_id: str = Field(min_length=1, max_length=36)


class CheckinRequest(TransitionRequest):
    action: ClassVar[ActionType] = ActionType.CHECKIN

    condition_status: ConditionStatus

    def _condition(self) -> ConditionStatus | None:
        return self.condition_status


class RepairRequest(TransitionRequest):
    action: ClassVar[ActionType] = ActionType.REPAIR


class CompleteRepairRequest(TransitionRequest):
    action: ClassVar[ActionType] = ActionType.COMPLETE_REPAIR


class DisposeRequest(TransitionRequest):
    action: ClassVar[ActionType] = ActionType.DISPOSE


class ReportLostRequest(TransitionRequest):
    action: ClassVar[ActionType] = ActionType.LOST


class ReportFoundRequest(TransitionRequest):
    action: ClassVar[ActionType] = ActionType.FOUND


class LedgerEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    asset_id: str
    person_id: str | None = None
    actor_id: str
    action: ActionType
    condition: ConditionStatus | None = None
    from_status: AssetStatus
    to_status: AssetStatus
    notes: str | None = None
    occurred_at: datetime
    recorded_at: datetime


class TransitionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    asset_id: str
    previous_status: AssetStatus
    status: AssetStatus
    holder_id: str | None = None
    description: str
    record: LedgerEntryResponse


class LedgerPage(BaseModel):
    items: list[LedgerEntryResponse]
    total: int
    limit: int
    offset: int
