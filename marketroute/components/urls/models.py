"""
URL codec component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from marketroute.components.registry import RouteMatch


@dataclass(frozen=True)
class BuildUrlInput:
    """Input for building a siteaccess-prefixed URL."""

    market: str
    locale: str
    path: str


@dataclass(frozen=True)
class ParseUrlInput:
    """Input for parsing a request path."""

    path: str


@dataclass(frozen=True)
class StripPrefixInput:
    """Input for stripping a locale prefix."""

    path: str


@dataclass(frozen=True)
class UrlOutput:
    """Output containing a URL path."""

    url: str


@dataclass(frozen=True)
class ParseUrlOutput:
    """Output of parsing a request path."""

    match: RouteMatch
    stripped_path: str
