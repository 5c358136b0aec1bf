"""
Languages component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import TranslationSet


class TranslationQueryPort(Protocol):
    """Content translation lookup."""

    def get_translation_set(self, content_id: int | str) -> TranslationSet | None:
        """Published translations for a content item, or None if unknown."""
        ...
