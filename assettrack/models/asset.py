"""Asset model module."""

from __future__ import annotations

from sqlalchemy import Enum, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from assettrack.models.base import AuditMixin, Base, new_uuid
from assettrack.models.enums import AssetStatus, enum_values


class Asset(Base, AuditMixin):
    __tablename__ = "assets"
    __table_args__ = (
        Index("idx_assets_status", "status"),
        Index("idx_assets_holder", "current_holder_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uuid: Mapped[str] = mapped_column(String(36), unique=True, nullable=False, default=new_uuid)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    asset_tag: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    serial_number: Mapped[str | None] = mapped_column(String(100), unique=True)
    status: Mapped[AssetStatus] = mapped_column(
        Enum(AssetStatus, name="asset_status", values_callable=enum_values),
        default=AssetStatus.AVAILABLE,
        nullable=False,
    )
    current_holder_id: Mapped[int | None] = mapped_column(ForeignKey("persons.id", ondelete="RESTRICT"))
    # Row version bumped on every UPDATE; not business data.
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)

    holder = relationship("Person")

    __mapper_args__ = {"version_id_col": version_id}
