"""
Registry component models.

Static locale / market / siteaccess tables and the parse result.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Locale:
    """Language + region code, e.g. eng-GB."""

    code: str
    display_name: str


@dataclass(frozen=True)
class Market:
    """Regional grouping sharing a fallback chain."""

    code: str
    url_prefix: str
    locales: tuple[str, ...]  # most specific first, global last


@dataclass(frozen=True)
class Siteaccess:
    """Routing partition bound to one locale and one market."""

    name: str
    url_prefix: str
    locale: str
    market: str


@dataclass(frozen=True)
class RouteMatch:
    """Result of parsing a request path."""

    market: str
    locale: str
    siteaccess: str
