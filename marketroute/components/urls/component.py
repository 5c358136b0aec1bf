"""
URL codec component - siteaccess-aware URL building and parsing.

Invariants:
- I1: parse_url never raises; unmatched paths get global defaults
- I2: For every siteaccess with prefix p: parse_url(p + "/x") selects it
      and strip_locale_prefix(p + "/x") == "/x"
- I3: Prefixes match on whole segments only
"""

from __future__ import annotations

from ._impl import UrlCodec
from .models import (
    BuildUrlInput,
    ParseUrlInput,
    ParseUrlOutput,
    StripPrefixInput,
    UrlOutput,
)


def run_build(inp: BuildUrlInput, *, codec: UrlCodec) -> UrlOutput:
    """Build a full URL for (market, locale, path)."""
    return UrlOutput(url=codec.build_full_url(inp.market, inp.locale, inp.path))


def run_parse(inp: ParseUrlInput, *, codec: UrlCodec) -> ParseUrlOutput:
    """Parse a path and return the match plus the unprefixed path."""
    return ParseUrlOutput(
        match=codec.parse_url(inp.path),
        stripped_path=codec.strip_locale_prefix(inp.path),
    )


def run_strip(inp: StripPrefixInput, *, codec: UrlCodec) -> UrlOutput:
    return UrlOutput(url=codec.strip_locale_prefix(inp.path))


def run(
    inp: BuildUrlInput | ParseUrlInput | StripPrefixInput,
    *,
    codec: UrlCodec,
) -> UrlOutput | ParseUrlOutput:
    """
    Main entry point for the URL codec component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, BuildUrlInput):
        return run_build(inp, codec=codec)
    elif isinstance(inp, ParseUrlInput):
        return run_parse(inp, codec=codec)
    elif isinstance(inp, StripPrefixInput):
        return run_strip(inp, codec=codec)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
