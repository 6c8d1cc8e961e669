"""Application entrypoint for the AssetTrack API."""

from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from assettrack.api.v1._errors import register_error_handlers
from assettrack.api.v1.router import get_api_router
from assettrack.core.config import get_config
from assettrack.core.startup import bootstrap


@asynccontextmanager
async def _lifespan(app: FastAPI):
    bootstrap()
    yield


def create_app() -> FastAPI:
    cfg = get_config()
    app = FastAPI(title=cfg.APP_NAME, version=cfg.APP_VERSION, lifespan=_lifespan)
    register_error_handlers(app)
    app.include_router(get_api_router())

    @app.get("/")
    def root() -> dict:
        return {"service": cfg.APP_NAME, "version": cfg.APP_VERSION, "api_prefix": cfg.API_PREFIX}

    return app


# Expose ASGI app for `uvicorn assettrack.main:app`.
app = create_app()


if __name__ == "__main__":
    cfg = get_config()
    uvicorn.run("assettrack.main:app", host=cfg.API_HOST, port=cfg.API_PORT)
