"""
Redirects component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import RedirectRecord


class RedirectStorePort(Protocol):
    """
    Content store lookup for redirect records.

    Implementations filter on content type "redirect" and active == true,
    sort by publish date descending.
    """

    def find_active_by_source(self, source_url: str) -> RedirectRecord | None:
        """Newest active record whose source equals `source_url`, or None."""
        ...

    def list_active(self, limit: int) -> list[RedirectRecord]:
        """Active records, newest publish first, at most `limit`."""
        ...
