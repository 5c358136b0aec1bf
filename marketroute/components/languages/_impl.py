"""
LanguageSwitcherService - per-locale availability and fallback resolution.

Key behaviors:
- The switcher lists every registry locale, not just translated ones;
  untranslated entries are marked unavailable but still carry a URL
- Fallback walks the market chain of the requested locale, in order
"""

from __future__ import annotations

from marketroute.components.registry import LocaleRegistry
from marketroute.components.urls import UrlCodec

from .models import LanguageOption, Translation, TranslationSet


class LanguageSwitcherService:
    """
    Language switcher service.

    Computes availability, fallback and URLs for content translations.
    """

    def __init__(self, registry: LocaleRegistry, codec: UrlCodec) -> None:
        """Initialize service."""
        self._registry = registry
        self._codec = codec

    def fallback_chain(self, locale: str) -> tuple[str, ...]:
        """Fallback chain of the market serving `locale`."""
        siteaccess = self._registry.siteaccess_of(locale)
        market = self._registry.market_of(siteaccess)
        return self._registry.locales_of(market)

    def available_languages(
        self,
        translations: TranslationSet,
        current_siteaccess: str | None = None,
    ) -> dict[str, LanguageOption]:
        """Build the switcher entry for every configured locale."""
        current = current_siteaccess or self._registry.default_siteaccess
        languages: dict[str, LanguageOption] = {}

        for locale in self._registry.all_locales():
            siteaccess = self._registry.siteaccess_of(locale)
            market = self._registry.market_of(siteaccess)

            languages[locale] = LanguageOption(
                siteaccess=siteaccess,
                locale=locale,
                market=market,
                display_name=self._registry.display_name_of(locale),
                url=self._codec.build_full_url(market, locale, translations.path),
                available=self.has_translation(translations, locale),
                current=siteaccess == current,
            )

        return languages

    def languages_by_market(
        self,
        translations: TranslationSet,
        current_siteaccess: str | None = None,
    ) -> dict[str, dict[str, LanguageOption]]:
        """Switcher entries grouped by market."""
        grouped: dict[str, dict[str, LanguageOption]] = {}
        for locale, option in self.available_languages(translations, current_siteaccess).items():
            grouped.setdefault(option.market, {})[locale] = option
        return grouped

    def has_translation(self, translations: TranslationSet, locale: str) -> bool:
        return locale in translations.language_codes

    def get_translation(self, translations: TranslationSet, locale: str) -> Translation | None:
        """
        Best available translation for `locale`.

        Exact match first, then the first translated locale in the
        market fallback chain. None when the chain is exhausted.
        """
        if self.has_translation(translations, locale):
            return Translation(translations.content_id, locale, locale)

        for fallback in self.fallback_chain(locale):
            if self.has_translation(translations, fallback):
                return Translation(translations.content_id, fallback, locale)

        return None

    def is_fallback_language(self, translations: TranslationSet, requested_locale: str) -> bool:
        """True iff a fallback is actually in effect for `requested_locale`."""
        return (
            translations.initial_language_code != requested_locale
            and not self.has_translation(translations, requested_locale)
        )

    def get_displayed_language(self, translations: TranslationSet, requested_locale: str) -> str:
        """Locale actually shown; the initial locale if the chain is exhausted."""
        translation = self.get_translation(translations, requested_locale)
        if translation is None:
            return translations.initial_language_code
        return translation.language_code

    def available_markets(self, translations: TranslationSet) -> frozenset[str]:
        """Markets with at least one translated locale in their chain."""
        return frozenset(
            market
            for market in self._registry.all_markets()
            if any(
                self.has_translation(translations, locale)
                for locale in self._registry.locales_of(market)
            )
        )


# --- Factory ---


def create_language_switcher(
    registry: LocaleRegistry,
    codec: UrlCodec | None = None,
) -> LanguageSwitcherService:
    """Create a LanguageSwitcherService."""
    return LanguageSwitcherService(registry=registry, codec=codec or UrlCodec(registry))
