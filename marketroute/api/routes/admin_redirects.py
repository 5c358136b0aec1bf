"""
Admin Redirects API Routes.

Read-only listing of active redirects for the back office.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from marketroute.api.deps import get_redirect_service
from marketroute.components.redirects import (
    MAX_LIST_LIMIT,
    RedirectLookupError,
    RedirectRecord,
    RedirectService,
    kind_of,
    status_code_for,
)

router = APIRouter()


class RedirectItemResponse(BaseModel):
    """Redirect response."""

    id: int
    source_url: str
    target_url: str | None
    status_code: int
    published_at: str


class RedirectListResponse(BaseModel):
    """List of redirects response."""

    redirects: list[RedirectItemResponse]
    count: int


# --- Helper Functions ---


def _record_to_response(record: RedirectRecord) -> RedirectItemResponse:
    return RedirectItemResponse(
        id=record.id,
        source_url=record.source_url,
        target_url=record.target_url,
        status_code=status_code_for(kind_of(record.redirect_type)),
        published_at=record.published_at.isoformat(),
    )


# --- Routes ---


@router.get("/redirects", response_model=RedirectListResponse)
def list_redirects(
    limit: int = Query(MAX_LIST_LIMIT, ge=1),
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectListResponse:
    """List active redirects, newest first."""
    try:
        records = service.list_active(limit)
    except RedirectLookupError as e:
        raise HTTPException(status_code=503, detail="Redirect store unavailable") from e

    return RedirectListResponse(
        redirects=[_record_to_response(r) for r in records],
        count=len(records),
    )
