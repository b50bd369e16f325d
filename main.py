"""Prism entry point."""

from __future__ import annotations

import logging

import uvicorn

from api.app import create_app
from config.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
log = logging.getLogger(__name__)

app = create_app()


if __name__ == "__main__":
    log.info("Prism server running on http://localhost:%d", settings.PRISM_PORT)
    uvicorn.run(
        "main:app",
        host=settings.PRISM_HOST,
        port=settings.PRISM_PORT,
        reload=False,
    )
