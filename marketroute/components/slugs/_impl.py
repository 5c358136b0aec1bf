"""
Slug generation - deterministic URL-safe tokens from free text.

Key behaviors:
- Pure and idempotent: slugify(slugify(x)) == slugify(x)
- Output always matches ^[a-z0-9-]+$, never empty
- Non-ASCII letters are transliterated (best effort) via unidecode
- Empty results collapse to the "n-a" sentinel
"""

from __future__ import annotations

import re

from unidecode import unidecode

EMPTY_SLUG = "n-a"

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

# Anything that is not a Unicode letter or digit
_SEPARATOR_RUN = re.compile(r"[\W_]+")
_UNWANTED = re.compile(r"[^-\w]+", re.ASCII)
_HYPHEN_RUN = re.compile(r"-+")


def slugify(text: str) -> str:
    """
    Convert text to a URL-safe slug.

    Steps are applied in a fixed order so output stays bit-compatible
    with previously generated aliases.
    """
    text = _SEPARATOR_RUN.sub("-", text)
    text = unidecode(text)
    text = _UNWANTED.sub("", text)
    text = text.strip("-")
    text = _HYPHEN_RUN.sub("-", text)
    text = text.lower()

    # Transliteration can emit "_", which \w keeps
    if "_" in text:
        text = _HYPHEN_RUN.sub("-", text.replace("_", "-")).strip("-")

    if not text:
        return EMPTY_SLUG

    return text


def is_valid_slug(slug: str) -> bool:
    """Check if slug is valid (lowercase alphanumeric + hyphens)."""
    if not slug:
        return False
    return bool(SLUG_PATTERN.match(slug))
