from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api.routers import search
from config.settings import settings
from scrapers.aggregator import Aggregator
from scrapers.base import HttpConfig

log = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent


@asynccontextmanager
async def _shared_client(app: FastAPI) -> AsyncIterator[None]:
    """Own one HTTP client for the process unless an aggregator was injected."""
    if app.state.aggregator is not None:
        yield
        return

    config = HttpConfig.from_settings(settings)
    async with config.build_client() as client:
        app.state.aggregator = Aggregator.from_client(client, config)
        log.info(
            "Aggregator ready with sources: %s",
            ", ".join(s.key for s in app.state.aggregator.sources),
        )
        yield
    app.state.aggregator = None


def create_app(aggregator: Aggregator | None = None) -> FastAPI:
    app = FastAPI(title="Prism", version="0.1.0", lifespan=_shared_client)
    app.state.aggregator = aggregator

    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(search.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    # Mounted last so it does not shadow the API routes.
    public_dir = Path(settings.PUBLIC_DIR)
    if not public_dir.is_absolute():
        public_dir = BASE_DIR / public_dir
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(public_dir), html=True), name="public")

    return app
