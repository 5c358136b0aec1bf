"""
Slug API Routes.
"""

from __future__ import annotations

from fastapi import APIRouter, Query
from pydantic import BaseModel

from marketroute.components.slugs import SlugifyInput, run_slugify

router = APIRouter()


class SlugResponse(BaseModel):
    text: str
    slug: str
    is_sentinel: bool


@router.get("", response_model=SlugResponse)
def make_slug(text: str = Query("", description="Text to slugify")) -> SlugResponse:
    """Turn arbitrary text into a URL slug."""
    result = run_slugify(SlugifyInput(text=text))
    return SlugResponse(text=result.text, slug=result.slug, is_sentinel=result.is_sentinel)
