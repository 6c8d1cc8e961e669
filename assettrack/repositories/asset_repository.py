"""Persistence gateway for asset rows."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from assettrack.core.exceptions import NotFoundError
from assettrack.lifecycle.state_machine import AssetState
from assettrack.models import Asset


class AssetRepository:
    """Reads and writes single assets inside the caller's unit of work."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def lock_and_load(self, asset_id: str) -> Asset:
        """Load an asset holding an exclusive row lock until the unit of work ends.

        ``populate_existing`` makes the locked read win over any copy already
        in the session's identity map.
        """
        stmt = (
            select(Asset)
            .where(Asset.uuid == asset_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        asset = self.db.execute(stmt).scalar_one_or_none()
        if asset is None:
            raise NotFoundError("Asset", asset_id)
        return asset

    def get(self, asset_id: str) -> Asset:
        asset = self.db.execute(select(Asset).where(Asset.uuid == asset_id)).scalar_one_or_none()
        if asset is None:
            raise NotFoundError("Asset", asset_id)
        return asset

    def save(self, asset: Asset, state: AssetState) -> Asset:
        """Write the whole business state back; the row version is bumped on flush."""
        asset.status = state.status
        asset.current_holder_id = state.holder_id
        self.db.flush()
        return asset

    @staticmethod
    def state_of(asset: Asset) -> AssetState:
        return AssetState(status=asset.status, holder_id=asset.current_holder_id)
