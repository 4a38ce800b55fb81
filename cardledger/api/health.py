"""
Liveness and readiness probes.

/health answers as long as the process is up. /ready also runs a query
through the card store, so it fails while the SQLite file is unreachable.
"""

import logging
from importlib.metadata import version as pkg_version
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from cardledger.db.store import CardStore, get_store
from cardledger.models.errors import StorageError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

APP_VERSION = pkg_version("cardledger")


class ProbeResponse(BaseModel):
    """Probe result. `database` is only reported by the readiness probe."""

    status: str
    version: str = APP_VERSION
    database: str | None = None


@router.get("/health", response_model=ProbeResponse, response_model_exclude_none=True)
async def health() -> ProbeResponse:
    """Report that the process is serving requests."""
    return ProbeResponse(status="ok")


@router.get(
    "/ready",
    response_model=ProbeResponse,
    responses={503: {"model": ProbeResponse}},
)
async def ready(
    response: Response,
    store: Annotated[CardStore, Depends(get_store)],
) -> ProbeResponse:
    """Ping the card store. Answers 503 when the database cannot be queried."""
    try:
        await store.ping()
    except StorageError as e:
        logger.warning("Readiness check failed: %s", e.detail)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return ProbeResponse(status="not ready", database="unreachable")

    return ProbeResponse(status="ready", database="reachable")
