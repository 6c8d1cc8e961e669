"""Transition coordinator: one locked, validated, audited unit of work per action."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from sqlalchemy.orm import Session

from assettrack.core.exceptions import (
    AssetTrackException,
    AuthenticationError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from assettrack.core.logging import LogContext, build_log_event
from assettrack.lifecycle.state_machine import (
    ACTION_CONDITIONS,
    DEFAULT_NOTES,
    checkin_action,
    plan_transition,
)
from assettrack.lifecycle.validator import validate_transition
from assettrack.models import ActionType, ConditionStatus, Person, TransitionRecord
from assettrack.models.base import ensure_utc, utcnow
from assettrack.repositories import AssetRepository, AuditLedger, PersonDirectory
from assettrack.services.base_service import BaseService
from assettrack.services.results import LedgerEntry, TransitionResult

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _known_condition(condition: ConditionStatus | str | None) -> ConditionStatus | None:
    try:
        return ConditionStatus(condition)
    except ValueError:
        return None


class TransitionService(BaseService):
    """Executes lifecycle actions against single assets with all-or-nothing semantics.

    Every action runs the same protocol: lock the asset row, resolve the
    receiving party (checkout only), validate against the locked status, write
    the new state, append one ledger record, commit. Any failure rolls the
    whole unit of work back.
    """

    def __init__(self, session_factory: Callable[[], Session] | None = None, clock: Clock = utcnow) -> None:
        super().__init__(session_factory)
        self._clock = clock

    def checkout(
        self,
        asset_id: str,
        *,
        person_id: str,
        actor_id: str,
        when: datetime | None = None,
        notes: str | None = None,
    ) -> TransitionResult:
        return self._execute(
            asset_id, ActionType.CHECKOUT, actor_id=actor_id, when=when, notes=notes, person_id=person_id
        )

    def checkin(
        self,
        asset_id: str,
        *,
        condition: ConditionStatus | str,
        actor_id: str,
        when: datetime | None = None,
        notes: str | None = None,
    ) -> TransitionResult:
        """Check an asset in; damaged sends it to repair and lost marks it missing."""
        return self._execute(
            asset_id,
            checkin_action(condition),
            actor_id=actor_id,
            when=when,
            notes=notes,
            condition=_known_condition(condition),
        )

    def repair(self, asset_id: str, *, actor_id: str, notes: str | None, when: datetime | None = None) -> TransitionResult:
        return self._execute(asset_id, ActionType.REPAIR, actor_id=actor_id, when=when, notes=notes)

    def complete_repair(
        self, asset_id: str, *, actor_id: str, when: datetime | None = None, notes: str | None = None
    ) -> TransitionResult:
        return self._execute(asset_id, ActionType.COMPLETE_REPAIR, actor_id=actor_id, when=when, notes=notes)

    def dispose(self, asset_id: str, *, actor_id: str, notes: str | None, when: datetime | None = None) -> TransitionResult:
        return self._execute(asset_id, ActionType.DISPOSE, actor_id=actor_id, when=when, notes=notes)

    def report_lost(
        self, asset_id: str, *, actor_id: str, notes: str | None, when: datetime | None = None
    ) -> TransitionResult:
        return self._execute(asset_id, ActionType.LOST, actor_id=actor_id, when=when, notes=notes)

    def report_found(
        self, asset_id: str, *, actor_id: str, when: datetime | None = None, notes: str | None = None
    ) -> TransitionResult:
        return self._execute(asset_id, ActionType.FOUND, actor_id=actor_id, when=when, notes=notes)

    def _execute(
        self,
        asset_id: str,
        action: ActionType,
        *,
        actor_id: str,
        when: datetime | None,
        notes: str | None,
        person_id: str | None = None,
        condition: ConditionStatus | None = None,
    ) -> TransitionResult:
        context = LogContext(actor_id=actor_id, asset_id=asset_id, action=action.value)
        if not actor_id or not str(actor_id).strip():
            raise AuthenticationError("An acting operator identity is required.")
        occurred_at = ensure_utc(when) if when is not None else self._clock()

        try:
            with self.unit_of_work() as db:
                result = self._transition(
                    db,
                    asset_id,
                    action,
                    actor_id=actor_id,
                    occurred_at=occurred_at,
                    notes=notes,
                    person_id=person_id,
                    condition=condition,
                )
        except (NotFoundError, InvalidTransitionError, ValidationError) as exc:
            logger.info(
                "asset.transition.rejected",
                extra=build_log_event("asset.transition.rejected", context, error_code=exc.code.value),
            )
            raise
        except AssetTrackException as exc:
            logger.warning(
                "asset.transition.failed",
                extra=build_log_event("asset.transition.failed", context, error_code=exc.code.value),
            )
            raise

        logger.info(
            "asset.transition.committed",
            extra=build_log_event(
                "asset.transition.committed",
                context,
                status=result.status.value,
                record_id=result.record.id,
            ),
        )
        return result

    def _transition(
        self,
        db: Session,
        asset_id: str,
        action: ActionType,
        *,
        actor_id: str,
        occurred_at: datetime,
        notes: str | None,
        person_id: str | None,
        condition: ConditionStatus | None,
    ) -> TransitionResult:
        assets = AssetRepository(db)
        asset = assets.lock_and_load(asset_id)

        party: Person | None = None
        if action is ActionType.CHECKOUT:
            if not person_id:
                raise ValidationError("Checkout requires a receiving person.", field="person_id")
            party = PersonDirectory(db).resolve(person_id)

        # Validate against the status read under the lock, never an earlier snapshot.
        decision = validate_transition(asset.status, action)
        decision.raise_for_rejection()

        previous = assets.state_of(asset)
        previous_holder = asset.holder
        target = plan_transition(previous, action, decision.next_status, party.id if party else None)
        assets.save(asset, target)

        record = AuditLedger(db).append(
            TransitionRecord(
                asset=asset,
                person=party or previous_holder,
                actor_id=str(actor_id),
                action=action,
                condition=condition or ACTION_CONDITIONS.get(action),
                from_status=previous.status,
                to_status=target.status,
                notes=notes or DEFAULT_NOTES.get(action),
                occurred_at=occurred_at,
                recorded_at=self._clock(),
            )
        )

        if target.holder_id is None:
            holder_uuid = None
        elif party is not None:
            holder_uuid = party.uuid
        else:
            holder_uuid = previous_holder.uuid if previous_holder is not None else None

        return TransitionResult(
            asset_id=asset.uuid,
            previous_status=previous.status,
            status=target.status,
            holder_id=holder_uuid,
            description=decision.description or "",
            record=LedgerEntry.from_record(record),
        )
