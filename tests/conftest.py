from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy import func, select

from assettrack.database.db import build_engine, build_session_factory
from assettrack.models import Asset, AssetStatus, Base, Person, TransitionRecord

FIXED_NOW = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'assettrack_test.db'}"


@pytest.fixture
def engine(database_url):
    engine = build_engine(database_url, lock_timeout_seconds=5)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def seed_person(session_factory):
    def _seed(name: str = "Jane Employee", department: str | None = "IT") -> str:
        with session_factory() as session:
            person = Person(name=name, email=f"{uuid.uuid4().hex[:10]}@example.com", department=department)
            session.add(person)
            session.commit()
            return person.uuid

    return _seed


@pytest.fixture
def seed_asset(session_factory):
    def _seed(status: AssetStatus = AssetStatus.AVAILABLE, holder_id: str | None = None) -> str:
        with session_factory() as session:
            holder = None
            if holder_id is not None:
                holder = session.execute(select(Person).where(Person.uuid == holder_id)).scalar_one()
            asset = Asset(
                name="ThinkPad T14",
                asset_tag=f"AT-{uuid.uuid4().hex[:8].upper()}",
                serial_number=uuid.uuid4().hex,
                status=status,
                holder=holder,
            )
            session.add(asset)
            session.commit()
            return asset.uuid

    return _seed


@pytest.fixture
def read_asset(session_factory):
    """Return ``(status, holder uuid)`` as committed in the database."""

    def _read(asset_id: str):
        with session_factory() as session:
            asset = session.execute(select(Asset).where(Asset.uuid == asset_id)).scalar_one()
            return asset.status, asset.holder.uuid if asset.holder is not None else None

    return _read


@pytest.fixture
def ledger_count(session_factory):
    def _count() -> int:
        with session_factory() as session:
            return session.execute(select(func.count(TransitionRecord.id))).scalar_one()

    return _count
