"""
Aliases component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import UrlAlias


class AliasStorePort(Protocol):
    """URL alias storage."""

    def list_aliases(self, content_id: int | str, language_code: str) -> list[UrlAlias]:
        """Aliases of a content item in one language."""
        ...

    def create_alias(
        self,
        content_id: int | str,
        path: str,
        language_code: str,
        forwarding: bool = False,
        always_available: bool = True,
    ) -> UrlAlias:
        """Create a custom alias."""
        ...
