"""
Slugs component - URL-safe slugs for content titles.
"""

from ._impl import EMPTY_SLUG, SLUG_PATTERN, is_valid_slug, slugify
from .component import run, run_slugify
from .models import SlugifyInput, SlugOutput

__all__ = [
    # Entry points
    "run",
    "run_slugify",
    # Models
    "SlugifyInput",
    "SlugOutput",
    # _impl re-exports
    "EMPTY_SLUG",
    "SLUG_PATTERN",
    "is_valid_slug",
    "slugify",
]
