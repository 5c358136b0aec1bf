"""
Language switcher API Routes.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from marketroute.api.deps import get_language_switcher, get_registry, get_translation_query
from marketroute.components.languages import (
    AvailableMarketsInput,
    LanguageSwitcherInput,
    LanguageSwitcherService,
    TranslationQueryPort,
    run_markets,
    run_switcher,
)
from marketroute.components.registry import LocaleRegistry

router = APIRouter()


class LanguageOptionResponse(BaseModel):
    siteaccess: str
    locale: str
    market: str
    display_name: str
    url: str
    available: bool
    current: bool


class LanguageSwitcherResponse(BaseModel):
    content_id: int
    languages: dict[str, LanguageOptionResponse]


class MarketsResponse(BaseModel):
    content_id: int
    markets: list[str]


@router.get(
    "/{content_id}/languages",
    response_model=LanguageSwitcherResponse,
    responses={
        400: {"description": "Unknown siteaccess"},
        404: {"description": "Content not found"},
    },
)
def get_languages(
    content_id: int,
    siteaccess: str | None = Query(None, description="Siteaccess serving the request"),
    query: TranslationQueryPort = Depends(get_translation_query),
    service: LanguageSwitcherService = Depends(get_language_switcher),
    registry: LocaleRegistry = Depends(get_registry),
) -> LanguageSwitcherResponse:
    """Language switcher entries for a content item, keyed by locale."""
    if siteaccess is not None and registry.get_siteaccess(siteaccess) is None:
        raise HTTPException(status_code=400, detail=f"Unknown siteaccess '{siteaccess}'")

    result = run_switcher(
        LanguageSwitcherInput(content_id=content_id, current_siteaccess=siteaccess),
        query=query,
        service=service,
    )
    if not result.success:
        raise HTTPException(status_code=404, detail=result.errors[0].message)

    return LanguageSwitcherResponse(
        content_id=content_id,
        languages={
            locale: LanguageOptionResponse(
                siteaccess=o.siteaccess,
                locale=o.locale,
                market=o.market,
                display_name=o.display_name,
                url=o.url,
                available=o.available,
                current=o.current,
            )
            for locale, o in result.languages.items()
        },
    )


@router.get(
    "/{content_id}/markets",
    response_model=MarketsResponse,
    responses={404: {"description": "Content not found"}},
)
def get_markets(
    content_id: int,
    query: TranslationQueryPort = Depends(get_translation_query),
    service: LanguageSwitcherService = Depends(get_language_switcher),
) -> MarketsResponse:
    """Markets where the content item can be shown."""
    result = run_markets(AvailableMarketsInput(content_id=content_id), query=query, service=service)
    if not result.success:
        raise HTTPException(status_code=404, detail=result.errors[0].message)

    return MarketsResponse(content_id=content_id, markets=sorted(result.markets))
