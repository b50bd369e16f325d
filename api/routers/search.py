from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from core.exceptions import InvalidQueryError

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["search"])


@router.get("/search")
async def search(request: Request, query: str | None = None, location: str | None = None):
    aggregator = request.app.state.aggregator
    try:
        bundle = await aggregator.search(query, location)
    except InvalidQueryError as e:
        return JSONResponse(status_code=400, content={"error": e.message})
    except Exception:
        log.exception("Search error")
        return JSONResponse(status_code=500, content={"error": "Search failed"})
    return bundle.to_dict()
