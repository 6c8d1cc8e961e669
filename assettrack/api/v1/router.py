"""Root API router for v1 endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from assettrack.api.v1 import assets, health, transactions
from assettrack.core.config import get_config

api_router = APIRouter(prefix=get_config().API_PREFIX)
api_router.include_router(health.router)
api_router.include_router(transactions.router)
api_router.include_router(assets.router)


def get_api_router() -> APIRouter:
    return api_router
