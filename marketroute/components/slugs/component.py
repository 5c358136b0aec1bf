"""
Slugs component - deterministic slug generation.

Invariants:
- I1: Output matches ^[a-z0-9-]+$
- I2: Never empty, never leading/trailing/double hyphens
- I3: Idempotent
"""

from __future__ import annotations

from ._impl import EMPTY_SLUG, slugify
from .models import SlugifyInput, SlugOutput


def run_slugify(inp: SlugifyInput) -> SlugOutput:
    """
    Slugify a piece of text.

    Args:
        inp: Input containing the source text.

    Returns:
        SlugOutput with the slug and whether the sentinel was used.
    """
    slug = slugify(inp.text)
    return SlugOutput(text=inp.text, slug=slug, is_sentinel=slug == EMPTY_SLUG)


def run(inp: SlugifyInput) -> SlugOutput:
    """Main entry point for the slugs component."""
    if isinstance(inp, SlugifyInput):
        return run_slugify(inp)
    raise ValueError(f"Unknown input type: {type(inp)}")
