"""
Redirect lookup API Routes.

Explicit resolution endpoint. Unlike the interceptor, store failures
are reported to the caller instead of being swallowed.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from marketroute.api.deps import get_redirect_service
from marketroute.components.redirects import RedirectLookupError, RedirectService

logger = logging.getLogger(__name__)

router = APIRouter()


class RedirectDecisionResponse(BaseModel):
    """Redirect decision for a path."""

    source_url: str
    target_url: str
    status_code: int


@router.get(
    "/resolve",
    response_model=RedirectDecisionResponse,
    responses={
        404: {"description": "No redirect for this path"},
        503: {"description": "Redirect store unavailable"},
    },
)
def resolve_redirect(
    path: str = Query(..., description="Exact source path"),
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectDecisionResponse:
    """Resolve a path to its redirect target."""
    try:
        decision = service.resolve(path)
    except RedirectLookupError as e:
        logger.error("Redirect lookup failed for '%s': %s", path, e.__cause__)
        raise HTTPException(status_code=503, detail="Redirect store unavailable") from e

    if decision is None:
        raise HTTPException(status_code=404, detail="No redirect")

    return RedirectDecisionResponse(
        source_url=path,
        target_url=decision.target_url,
        status_code=decision.status_code,
    )
