"""Persistence gateways used inside a unit of work."""

from assettrack.repositories.asset_repository import AssetRepository
from assettrack.repositories.audit_ledger import AuditLedger
from assettrack.repositories.person_directory import PersonDirectory

__all__ = ["AssetRepository", "AuditLedger", "PersonDirectory"]
