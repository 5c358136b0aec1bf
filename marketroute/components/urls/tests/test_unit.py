"""
URL codec component unit tests.

Tests for URL building, parsing and prefix stripping.
"""

from __future__ import annotations

import pytest

from marketroute.components.registry import RouteMatch, create_registry
from marketroute.components.urls import (
    BuildUrlInput,
    ParseUrlInput,
    StripPrefixInput,
    UrlCodec,
    create_url_codec,
    has_prefix,
    normalize_path,
    run,
)


@pytest.fixture
def codec() -> UrlCodec:
    return create_url_codec(create_registry())


class TestHelpers:
    """Test path helpers."""

    def test_normalize_path(self) -> None:
        assert normalize_path("") == "/"
        assert normalize_path("news/a/") == "/news/a"
        assert normalize_path("///news//") == "/news"

    def test_has_prefix_is_segment_exact(self) -> None:
        assert has_prefix("/th-en", "/th-en")
        assert has_prefix("/th-en/x", "/th-en")
        assert not has_prefix("/th-enable", "/th-en")
        assert not has_prefix("/x", "")


class TestBuildFullUrl:
    """Test URL building."""

    def test_global_english(self, codec: UrlCodec) -> None:
        assert codec.build_full_url("global", "eng-GB", "/news/a") == "/global-en/news/a"

    def test_thai(self, codec: UrlCodec) -> None:
        assert codec.build_full_url("th", "tha-TH", "/news/a") == "/th-th/news/a"

    def test_strips_slashes(self, codec: UrlCodec) -> None:
        assert codec.build_full_url("my", "eng-MY", "news/a/") == "/my-en/news/a"

    def test_empty_path_returns_prefix(self, codec: UrlCodec) -> None:
        assert codec.build_full_url("th", "eng-TH", "") == "/th-en"
        assert codec.build_full_url("th", "eng-TH", "/") == "/th-en"

    def test_unknown_locale_uses_default_siteaccess(self, codec: UrlCodec) -> None:
        assert codec.build_full_url("global", "fra-FR", "/x") == "/global-en/x"

    def test_market_is_advisory(self, codec: UrlCodec) -> None:
        assert codec.build_full_url("global", "tha-TH", "/x") == "/th-th/x"


class TestParseUrl:
    """Test URL parsing."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/th-th/news", RouteMatch("th", "tha-TH", "th-th")),
            ("/th-en/news", RouteMatch("th", "eng-TH", "th-en")),
            ("/my-en", RouteMatch("my", "eng-MY", "my-en")),
            ("/global-en/news/a", RouteMatch("global", "eng-GB", "global-en")),
            ("/admin/dashboard", RouteMatch("global", "eng-GB", "admin")),
            ("/admin", RouteMatch("global", "eng-GB", "admin")),
        ],
    )
    def test_known_prefixes(self, codec: UrlCodec, path: str, expected: RouteMatch) -> None:
        assert codec.parse_url(path) == expected

    def test_no_prefix_yields_global_defaults(self, codec: UrlCodec) -> None:
        match = codec.parse_url("/news/a")
        assert match.market == "global"
        assert match.locale == "eng-GB"
        assert match.siteaccess == "global-en"

    @pytest.mark.parametrize("path", ["/th-enable", "/th-thai/x", "/administrator", "/TH-TH/x"])
    def test_partial_segments_do_not_match(self, codec: UrlCodec, path: str) -> None:
        assert codec.parse_url(path).siteaccess == "global-en"

    @pytest.mark.parametrize("path", ["", "/", "//", "?", "ภ", "th-th"])
    def test_total_function(self, codec: UrlCodec, path: str) -> None:
        assert isinstance(codec.parse_url(path), RouteMatch)

    def test_missing_leading_slash_is_normalized(self, codec: UrlCodec) -> None:
        assert codec.parse_url("th-th/news").siteaccess == "th-th"

    def test_matches_siteaccess(self, codec: UrlCodec) -> None:
        assert codec.matches_siteaccess("/my-en/x", "my-en") is True
        assert codec.matches_siteaccess("/my-en/x", "th-en") is False
        assert codec.matches_siteaccess("/x", "global-en") is True


class TestStripLocalePrefix:
    """Test prefix stripping."""

    def test_strips_siteaccess_prefix(self, codec: UrlCodec) -> None:
        assert codec.strip_locale_prefix("/th-th/news/a") == "/news/a"

    def test_strips_admin_prefix(self, codec: UrlCodec) -> None:
        assert codec.strip_locale_prefix("/admin/redirects") == "/redirects"

    def test_bare_prefix_returns_root(self, codec: UrlCodec) -> None:
        assert codec.strip_locale_prefix("/my-en") == "/"
        assert codec.strip_locale_prefix("/admin/") == "/"

    def test_no_prefix_returns_path(self, codec: UrlCodec) -> None:
        assert codec.strip_locale_prefix("/news/a") == "/news/a"
        assert codec.strip_locale_prefix("/th-enable") == "/th-enable"


class TestRoundTrip:
    """Test parse/strip agree with configured prefixes."""

    def test_every_siteaccess_round_trips(self, codec: UrlCodec) -> None:
        for sa in codec.registry.siteaccesses():
            url = sa.url_prefix + "/x"
            assert codec.parse_url(url).siteaccess == sa.name
            assert codec.strip_locale_prefix(url) == "/x"

    def test_build_then_parse(self, codec: UrlCodec) -> None:
        for locale in codec.registry.all_locales():
            url = codec.build_full_url("global", locale, "/news/a")
            match = codec.parse_url(url)
            assert match.locale == locale
            assert codec.strip_locale_prefix(url) == "/news/a"


class TestGenerateRouteWithLocale:
    """Test route prefixing."""

    def test_adds_prefix(self, codec: UrlCodec) -> None:
        assert codec.generate_route_with_locale("/news", "th-th") == "/th-th/news"

    def test_keeps_existing_prefix(self, codec: UrlCodec) -> None:
        assert codec.generate_route_with_locale("/th-th/news", "th-th") == "/th-th/news"

    def test_unknown_siteaccess_leaves_route(self, codec: UrlCodec) -> None:
        assert codec.generate_route_with_locale("/news", "unknown") == "/news"

    def test_root_route(self, codec: UrlCodec) -> None:
        assert codec.generate_route_with_locale("/", "my-en") == "/my-en"


class TestComponentEntryPoints:
    """Test run dispatch."""

    def test_build(self, codec: UrlCodec) -> None:
        out = run(BuildUrlInput(market="th", locale="tha-TH", path="/news/a"), codec=codec)
        assert out.url == "/th-th/news/a"  # type: ignore[union-attr]

    def test_parse(self, codec: UrlCodec) -> None:
        out = run(ParseUrlInput(path="/th-en/news"), codec=codec)
        assert out.match.siteaccess == "th-en"  # type: ignore[union-attr]
        assert out.stripped_path == "/news"  # type: ignore[union-attr]

    def test_strip(self, codec: UrlCodec) -> None:
        out = run(StripPrefixInput(path="/my-en/a"), codec=codec)
        assert out.url == "/a"  # type: ignore[union-attr]

    def test_unknown_input(self, codec: UrlCodec) -> None:
        with pytest.raises(ValueError):
            run(object(), codec=codec)  # type: ignore[arg-type]
