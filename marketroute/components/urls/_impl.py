"""
UrlCodec - builds and parses siteaccess-prefixed URL paths.

Key behaviors:
- Prefix matching is case-sensitive and whole-segment only
  (/th-enable never matches /th-en)
- Admin prefix is checked first, then siteaccess prefixes longest first
- parse_url is total: every input yields exactly one RouteMatch
"""

from __future__ import annotations

from marketroute.components.registry import LocaleRegistry, RouteMatch, Siteaccess


def normalize_path(path: str) -> str:
    """Collapse leading/trailing slashes to a single leading slash."""
    return "/" + path.strip("/")


def has_prefix(path: str, prefix: str) -> bool:
    """Check `prefix` matches `path` on a segment boundary."""
    if not prefix:
        return False
    return path == prefix or path.startswith(prefix + "/")


class UrlCodec:
    """
    URL path codec.

    Maps (market, locale, path) to URLs and URLs back to route matches.
    """

    def __init__(self, registry: LocaleRegistry) -> None:
        """Initialize codec."""
        self._registry = registry
        # Most specific first
        self._prefixed: tuple[Siteaccess, ...] = registry.prefixed_siteaccesses()

    @property
    def registry(self) -> LocaleRegistry:
        return self._registry

    def _match(self, url: str) -> Siteaccess | None:
        for sa in self._prefixed:
            if has_prefix(url, sa.url_prefix):
                return sa
        return None

    def build_full_url(self, market: str, locale: str, path: str) -> str:
        """
        Build the full URL for a path in a locale.

        `market` only matters when several siteaccesses serve `locale`.
        """
        siteaccess = self._registry.siteaccess_of(locale, market)
        prefix = self._registry.url_prefix_of(siteaccess)

        path = path.strip("/")
        if path:
            return f"{prefix}/{path}"

        return prefix or "/"

    def parse_url(self, path: str) -> RouteMatch:
        """Parse a path into market, locale and siteaccess."""
        url = normalize_path(path)
        registry = self._registry

        if has_prefix(url, registry.admin_prefix):
            return RouteMatch(
                market=registry.global_market,
                locale=registry.global_locale,
                siteaccess=registry.admin_name,
            )

        sa = self._match(url)
        if sa is not None:
            return RouteMatch(market=sa.market, locale=sa.locale, siteaccess=sa.name)

        return RouteMatch(
            market=registry.global_market,
            locale=registry.global_locale,
            siteaccess=registry.default_siteaccess,
        )

    def matches_siteaccess(self, path: str, siteaccess_name: str) -> bool:
        return self.parse_url(path).siteaccess == siteaccess_name

    def strip_locale_prefix(self, path: str) -> str:
        """
        Remove the admin or siteaccess prefix from a path.

        Returns "/" if nothing remains, the normalized path if no prefix matches.
        """
        url = normalize_path(path)

        admin_prefix = self._registry.admin_prefix
        if has_prefix(url, admin_prefix):
            return url[len(admin_prefix) :] or "/"

        sa = self._match(url)
        if sa is not None:
            return url[len(sa.url_prefix) :] or "/"

        return url

    def generate_route_with_locale(self, route_path: str, siteaccess_name: str) -> str:
        """Prefix a generated route with the siteaccess prefix unless already present."""
        prefix = self._registry.url_prefix_of(siteaccess_name)
        route = route_path if route_path.startswith("/") else "/" + route_path

        if not prefix or has_prefix(route, prefix):
            return route

        if route == "/":
            return prefix

        return prefix + route


# --- Factory ---


def create_url_codec(registry: LocaleRegistry) -> UrlCodec:
    """Create a UrlCodec."""
    return UrlCodec(registry)
