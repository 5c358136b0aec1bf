"""
Registry component - locale/market/siteaccess lookups.

Invariants:
- I1: Every market's fallback chain is non-empty and ends in the global locale
- I2: Unknown keys resolve to global defaults, never raise
- I3: Tables are immutable after construction
"""

from __future__ import annotations

from ._impl import LocaleRegistry
from .models import Locale, Market, Siteaccess


def describe_locale(registry: LocaleRegistry, locale: str) -> dict[str, str]:
    """
    Describe a locale with its siteaccess, market and display name.

    Args:
        registry: Registry to query.
        locale: Locale code (unknown codes fall back to defaults).

    Returns:
        Dict with locale, siteaccess, market, display_name and url_prefix.
    """
    siteaccess = registry.siteaccess_of(locale)
    return {
        "locale": locale,
        "siteaccess": siteaccess,
        "market": registry.market_of(siteaccess),
        "display_name": registry.display_name_of(locale),
        "url_prefix": registry.url_prefix_of(siteaccess),
    }


def list_markets(registry: LocaleRegistry) -> list[Market]:
    """All markets with their fallback chains."""
    return [m for code in registry.all_markets() if (m := registry.get_market(code))]


def list_locales(registry: LocaleRegistry) -> list[Locale]:
    return [loc for code in registry.all_locales() if (loc := registry.get_locale(code))]


def list_siteaccesses(registry: LocaleRegistry) -> list[Siteaccess]:
    return list(registry.siteaccesses())
