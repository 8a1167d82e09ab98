"""Link resolution endpoints.

Routes
------
POST /api/process-url    Body: {"url": "https://..."}    → process_url
GET  /api/health                                          → liveness
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from streamscout.scraper import ResolveError, process_url, validate_url

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ProcessUrlRequest(BaseModel):
    url: Optional[str] = None


class LinkOut(BaseModel):
    url: str
    label: str
    isTrusted: bool


class ProcessUrlData(BaseModel):
    links: list[LinkOut]
    pageTitle: str
    isZipFile: bool


class ProcessUrlResponse(BaseModel):
    success: bool
    data: ProcessUrlData


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def error_response(message: str, status_code: int = 400) -> JSONResponse:
    """Failure envelope; never carries partial data."""
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/process-url", response_model=ProcessUrlResponse)
async def process_url_endpoint(body: ProcessUrlRequest) -> Any:
    """Resolve a gateway URL into ranked links, page title and zip flag."""
    try:
        url = validate_url(body.url)
        result = await process_url(url)
    except ResolveError as exc:
        logger.warning("Processing failed: %s", exc)
        return error_response(str(exc))
    except Exception:
        logger.exception("Processing failed unexpectedly")
        return error_response("An unknown error occurred")
    return {"success": True, "data": result.to_dict()}


@router.get("/health")
def health() -> dict[str, Any]:
    return {"success": True, "data": {"status": "ok"}}
