"""
Slugs component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SlugifyInput:
    """Input for slug generation."""

    text: str


@dataclass(frozen=True)
class SlugOutput:
    """Output of slug generation."""

    text: str
    slug: str
    is_sentinel: bool = False
