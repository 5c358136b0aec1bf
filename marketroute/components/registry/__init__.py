"""
Registry component - static locale, market and siteaccess tables.
"""

from ._impl import LocaleRegistry, create_registry
from .component import describe_locale, list_locales, list_markets, list_siteaccesses
from .models import Locale, Market, RouteMatch, Siteaccess

__all__ = [
    # Entry points
    "describe_locale",
    "list_locales",
    "list_markets",
    "list_siteaccesses",
    # Models
    "Locale",
    "Market",
    "RouteMatch",
    "Siteaccess",
    # _impl re-exports
    "LocaleRegistry",
    "create_registry",
]
