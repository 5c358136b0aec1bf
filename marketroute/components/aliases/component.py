"""
Aliases component - alias paths with virtual segments.

Invariants:
- I1: Alias paths start with "/" and end in a valid slug
- I2: Global-market content has no market segment
- I3: Publishing is never interrupted by alias failures
"""

from __future__ import annotations

from ._impl import UrlAliasService, build_alias_path
from .models import AliasOutput, BuildAliasInput, PublishedContent


def run_build(inp: BuildAliasInput) -> AliasOutput:
    """Build an alias path without storing it."""
    path = build_alias_path(inp.title, inp.content_type, inp.market)
    return AliasOutput(path=path or None)


def run_publish(content: PublishedContent, *, service: UrlAliasService) -> AliasOutput:
    """
    Publish hook: generate and store an alias.

    Args:
        content: The content that was just published.
        service: Alias service.

    Returns:
        AliasOutput with the created path, if any.
    """
    path = service.on_publish(content)
    return AliasOutput(path=path, created=path is not None)
