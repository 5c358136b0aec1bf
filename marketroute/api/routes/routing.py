"""
Routing API Routes.

Read-only endpoints over the locale/market registry and the URL codec.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from marketroute.api.deps import get_codec, get_registry
from marketroute.components.registry import LocaleRegistry, list_markets
from marketroute.components.urls import (
    BuildUrlInput,
    ParseUrlInput,
    UrlCodec,
    run_build,
    run_parse,
)

router = APIRouter()


class RouteMatchResponse(BaseModel):
    """Parsed request path."""

    market: str
    locale: str
    siteaccess: str
    stripped_path: str


class UrlResponse(BaseModel):
    """Built URL."""

    url: str


class MarketResponse(BaseModel):
    code: str
    url_prefix: str
    locales: list[str] = Field(..., description="Fallback chain, most specific first")


@router.get("/parse", response_model=RouteMatchResponse)
def parse_path(
    path: str = Query(..., description="Request path (e.g., /th-th/news/x)"),
    codec: UrlCodec = Depends(get_codec),
) -> RouteMatchResponse:
    """Identify market, locale and siteaccess of a request path."""
    result = run_parse(ParseUrlInput(path=path), codec=codec)
    return RouteMatchResponse(
        market=result.match.market,
        locale=result.match.locale,
        siteaccess=result.match.siteaccess,
        stripped_path=result.stripped_path,
    )


@router.get("/url", response_model=UrlResponse)
def build_url(
    market: str = Query(...),
    locale: str = Query(...),
    path: str = Query("", description="Path without siteaccess prefix"),
    codec: UrlCodec = Depends(get_codec),
) -> UrlResponse:
    """Build the siteaccess-prefixed URL for a locale."""
    result = run_build(BuildUrlInput(market=market, locale=locale, path=path), codec=codec)
    return UrlResponse(url=result.url)


@router.get("/markets", response_model=list[MarketResponse])
def get_markets(registry: LocaleRegistry = Depends(get_registry)) -> list[MarketResponse]:
    """List configured markets with their fallback chains."""
    return [
        MarketResponse(code=m.code, url_prefix=m.url_prefix, locales=list(m.locales))
        for m in list_markets(registry)
    ]
