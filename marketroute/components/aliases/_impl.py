"""
UrlAliasService - SEO-friendly alias paths for published content.

Alias shape: /<market>/<virtual segment>/<slug>
- market segment only for non-global markets
- virtual segment comes from the content type (news, insights), not the tree
- slug comes from the title field

Key behaviors:
- Only configured content types get aliases
- Existing identical custom aliases are left alone
- Failures are logged; publishing never breaks because of an alias
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from marketroute.components.registry import LocaleRegistry
from marketroute.components.slugs import slugify

from .models import PublishedContent
from .ports import AliasStorePort

logger = logging.getLogger(__name__)

CONTENT_TYPE_SEGMENTS = MappingProxyType(
    {
        "news": "news",
        "insights": "insights",
        "landing_page": "",
        "redirect": "",
    }
)

ALIASED_CONTENT_TYPES = frozenset({"news", "insights", "landing_page"})

TITLE_FIELDS = ("title", "name", "heading")


def content_type_segment(content_type: str) -> str | None:
    """Virtual segment for a content type, None if it has none."""
    segment = CONTENT_TYPE_SEGMENTS.get(content_type)
    return segment or None


def uses_virtual_segments(content_type: str) -> bool:
    return content_type_segment(content_type) is not None


def market_from_language_code(
    language_code: str,
    known_markets: frozenset[str] | tuple[str, ...] = ("my", "th"),
    global_market: str = "global",
) -> str:
    """Market from the region part of a language code (eng-MY -> my)."""
    parts = language_code.split("-")
    if len(parts) < 2:
        return global_market

    country = parts[1].lower()
    return country if country in known_markets else global_market


def title_of(content: PublishedContent) -> str:
    """Value of the first title-like field the content has, "" if none.

    A present but empty field still wins, so no alias is generated for it.
    """
    for field_name in TITLE_FIELDS:
        if field_name in content.fields:
            value = content.fields[field_name]
            return str(value) if value else ""
    return ""


def build_alias_path(
    title: str,
    content_type: str,
    market: str = "global",
    global_market: str = "global",
) -> str:
    """
    Build an alias path from a title.

    Returns "" for an empty title.
    """
    if not title or not title.strip():
        return ""

    parts = []
    if market != global_market:
        parts.append(market)

    segment = content_type_segment(content_type)
    if segment is not None:
        parts.append(segment)

    parts.append(slugify(title))

    return "/" + "/".join(parts)


class UrlAliasService:
    """
    URL alias service.

    Generates and stores alias paths when content is published.
    """

    def __init__(self, store: AliasStorePort, registry: LocaleRegistry) -> None:
        """Initialize service."""
        self._store = store
        self._registry = registry

    def market_for(self, language_code: str) -> str:
        markets = frozenset(self._registry.all_markets()) - {self._registry.global_market}
        return market_from_language_code(language_code, markets, self._registry.global_market)

    def alias_path_for(self, content: PublishedContent) -> str:
        return build_alias_path(
            title_of(content),
            content.content_type,
            self.market_for(content.main_language_code),
            self._registry.global_market,
        )

    def on_publish(self, content: PublishedContent) -> str | None:
        """
        Create the alias for freshly published content.

        Returns the created path, or None when nothing was created.
        """
        if content.content_type not in ALIASED_CONTENT_TYPES:
            return None

        try:
            path = self.alias_path_for(content)
            if not path:
                return None

            existing = self._store.list_aliases(content.content_id, content.main_language_code)
            if any(alias.is_custom and alias.path == path for alias in existing):
                return None

            self._store.create_alias(
                content.content_id,
                path,
                content.main_language_code,
                forwarding=False,
                always_available=True,
            )
        except Exception:
            logger.exception("Failed to create URL alias for content %s", content.content_id)
            return None

        logger.info("Created URL alias %s for content %s", path, content.content_id)
        return path


# --- Factory ---


def create_alias_service(store: AliasStorePort, registry: LocaleRegistry) -> UrlAliasService:
    """Create a UrlAliasService."""
    return UrlAliasService(store=store, registry=registry)
