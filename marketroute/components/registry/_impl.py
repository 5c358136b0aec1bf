"""
LocaleRegistry - read-only locale/market/siteaccess lookups.

Built once from validated RoutingRules; never mutated afterwards.
Every lookup is a dict lookup and a miss resolves to the documented
global default instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from marketroute.rules import RoutingRules, default_rules

from .models import Locale, Market, Siteaccess


class LocaleRegistry:
    """
    Locale/market registry.

    Holds the static tables and answers lookups with global fallbacks.
    """

    def __init__(self, rules: RoutingRules) -> None:
        """Initialize registry from validated rules."""
        self._rules = rules

        locales = {r.code: Locale(code=r.code, display_name=r.display_name) for r in rules.locales}
        markets = {
            r.code: Market(code=r.code, url_prefix=r.url_prefix, locales=tuple(r.locales))
            for r in rules.markets
        }
        siteaccesses = {
            r.name: Siteaccess(name=r.name, url_prefix=r.url_prefix, locale=r.locale, market=r.market)
            for r in rules.siteaccesses
        }

        by_locale: dict[str, list[str]] = {}
        for sa in siteaccesses.values():
            by_locale.setdefault(sa.locale, []).append(sa.name)

        self._locales: Mapping[str, Locale] = MappingProxyType(locales)
        self._markets: Mapping[str, Market] = MappingProxyType(markets)
        self._siteaccesses: Mapping[str, Siteaccess] = MappingProxyType(siteaccesses)
        self._siteaccesses_by_locale: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {code: tuple(names) for code, names in by_locale.items()}
        )

    # --- Defaults ---

    @property
    def rules(self) -> RoutingRules:
        return self._rules

    @property
    def global_locale(self) -> str:
        return self._rules.global_locale

    @property
    def global_market(self) -> str:
        return self._rules.global_market

    @property
    def default_siteaccess(self) -> str:
        return self._rules.default_siteaccess

    @property
    def admin_name(self) -> str:
        return self._rules.admin.name

    @property
    def admin_prefix(self) -> str:
        return self._rules.admin.url_prefix

    # --- Lookups ---

    def market_of(self, siteaccess_name: str) -> str:
        """Get the market a siteaccess belongs to (default: global market)."""
        sa = self._siteaccesses.get(siteaccess_name)
        return sa.market if sa else self.global_market

    def locales_of(self, market: str) -> tuple[str, ...]:
        """Get the fallback chain for a market (default: global locale only)."""
        m = self._markets.get(market)
        return m.locales if m else (self.global_locale,)

    def siteaccess_of(self, locale: str, market: str | None = None) -> str:
        """
        Get the siteaccess serving a locale (default: default siteaccess).

        When several siteaccesses serve the same locale, the one in
        `market` is preferred; otherwise the first configured wins.
        """
        names = self._siteaccesses_by_locale.get(locale)
        if not names:
            return self.default_siteaccess
        if market is not None and len(names) > 1:
            for name in names:
                if self._siteaccesses[name].market == market:
                    return name
        return names[0]

    def url_prefix_of(self, siteaccess_name: str) -> str:
        """Get the URL prefix of a siteaccess (admin has a reserved prefix)."""
        if siteaccess_name == self.admin_name:
            return self.admin_prefix
        sa = self._siteaccesses.get(siteaccess_name)
        return sa.url_prefix if sa else ""

    def market_url_prefix_of(self, market: str) -> str:
        m = self._markets.get(market)
        return m.url_prefix if m else ""

    def display_name_of(self, locale: str) -> str:
        loc = self._locales.get(locale)
        return loc.display_name if loc else locale

    def all_markets(self) -> tuple[str, ...]:
        return tuple(self._markets)

    def all_locales(self) -> tuple[str, ...]:
        return tuple(self._locales)

    # --- Entity access ---

    def get_locale(self, code: str) -> Locale | None:
        return self._locales.get(code)

    def get_market(self, code: str) -> Market | None:
        return self._markets.get(code)

    def get_siteaccess(self, name: str) -> Siteaccess | None:
        return self._siteaccesses.get(name)

    def siteaccesses(self) -> tuple[Siteaccess, ...]:
        """All public siteaccesses in configuration order."""
        return tuple(self._siteaccesses.values())

    def prefixed_siteaccesses(self) -> tuple[Siteaccess, ...]:
        """Siteaccesses with a non-empty prefix, longest prefix first."""
        prefixed = [sa for sa in self._siteaccesses.values() if sa.url_prefix]
        return tuple(sorted(prefixed, key=lambda sa: len(sa.url_prefix), reverse=True))


# --- Factory ---


def create_registry(rules: RoutingRules | None = None) -> LocaleRegistry:
    """Create a LocaleRegistry (built-in tables when no rules given)."""
    return LocaleRegistry(rules or default_rules())
