"""FastAPI application factory.

Routers
-------
All endpoints are mounted under ``/api``:

    POST /api/process-url   resolve a gateway URL into ranked links
    GET  /api/health        liveness probe

Every response uses the envelope ``{"success": bool, "data"?: ..., "error"?: str}``.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from streamscout import __version__
from streamscout.api.routers import links as links_router


async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable bodies in the standard failure envelope."""
    return links_router.error_response("Invalid request body")


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="StreamScout API",
        description=(
            "Resolves gateway pages into ranked direct download and stream "
            "links, with the listing page title and a zip-only flag."
        ),
        version=__version__,
    )

    # The browser UI is served from a different origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _invalid_request)
    app.include_router(links_router.router, prefix="/api", tags=["links"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn streamscout.api.app:app --reload
app = create_app()
