"""
Languages component - language switcher and translation fallback.

Invariants:
- I1: Switcher covers every registry locale
- I2: available == locale has a published translation
- I3: current == locale's siteaccess is the current siteaccess
- I4: Fallback order is the market chain order
"""

from __future__ import annotations

from ._impl import LanguageSwitcherService
from .models import (
    AvailableMarketsInput,
    AvailableMarketsOutput,
    LanguageError,
    LanguageSwitcherInput,
    LanguageSwitcherOutput,
)
from .ports import TranslationQueryPort


def _not_found(content_id: int | str) -> LanguageError:
    return LanguageError(
        code="not_found",
        message=f"Content {content_id} not found",
        field="content_id",
    )


def run_switcher(
    inp: LanguageSwitcherInput,
    *,
    query: TranslationQueryPort,
    service: LanguageSwitcherService,
) -> LanguageSwitcherOutput:
    """
    Build the language switcher for a content item.

    Args:
        inp: Content id and the siteaccess serving the request.
        query: Translation query port.
        service: Language switcher service.

    Returns:
        LanguageSwitcherOutput keyed by locale, or a not_found error.
    """
    translations = query.get_translation_set(inp.content_id)
    if translations is None:
        return LanguageSwitcherOutput(languages={}, errors=[_not_found(inp.content_id)], success=False)

    return LanguageSwitcherOutput(
        languages=service.available_languages(translations, inp.current_siteaccess),
    )


def run_markets(
    inp: AvailableMarketsInput,
    *,
    query: TranslationQueryPort,
    service: LanguageSwitcherService,
) -> AvailableMarketsOutput:
    """List markets where a content item has at least one translation."""
    translations = query.get_translation_set(inp.content_id)
    if translations is None:
        return AvailableMarketsOutput(
            markets=frozenset(), errors=[_not_found(inp.content_id)], success=False
        )

    return AvailableMarketsOutput(markets=service.available_markets(translations))
