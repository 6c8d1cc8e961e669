from __future__ import annotations

import threading

import pytest

from assettrack.core.exceptions import ConcurrencyTimeoutError, InvalidTransitionError
from assettrack.database.db import build_engine, build_session_factory
from assettrack.models import AssetStatus
from assettrack.services.transition_service import TransitionService


def test_concurrent_checkouts_commit_exactly_once(session_factory, seed_person, seed_asset, read_asset, ledger_count):
    asset = seed_asset()
    people = [seed_person(name="Alice"), seed_person(name="Bob")]
    barrier = threading.Barrier(len(people))
    outcomes: list[object] = []
    lock = threading.Lock()

    def _checkout(person_id: str) -> None:
        service = TransitionService(session_factory=session_factory)
        barrier.wait()
        try:
            result = service.checkout(asset, person_id=person_id, actor_id="desk")
        except InvalidTransitionError as exc:
            outcome: object = exc
        else:
            outcome = result
        with lock:
            outcomes.append(outcome)

    threads = [threading.Thread(target=_checkout, args=(person,)) for person in people]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    winners = [item for item in outcomes if not isinstance(item, InvalidTransitionError)]
    losers = [item for item in outcomes if isinstance(item, InvalidTransitionError)]
    assert len(winners) == 1
    assert len(losers) == 1
    assert losers[0].current_status is AssetStatus.ASSIGNED

    status, holder = read_asset(asset)
    assert status is AssetStatus.ASSIGNED
    assert holder == winners[0].holder_id
    assert ledger_count() == 1


def test_lock_wait_is_bounded(engine, database_url, seed_asset, read_asset):
    asset = seed_asset()
    impatient_engine = build_engine(database_url, lock_timeout_seconds=0.2)
    service = TransitionService(session_factory=build_session_factory(impatient_engine))

    blocker = engine.connect()
    blocker.begin()
    try:
        with pytest.raises(ConcurrencyTimeoutError) as exc:
            service.repair(asset, actor_id="desk", notes="overheating")
        assert exc.value.retryable is True
    finally:
        blocker.rollback()
        blocker.close()
        impatient_engine.dispose()

    assert read_asset(asset) == (AssetStatus.AVAILABLE, None)
