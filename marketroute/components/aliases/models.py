"""
Aliases component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PublishedContent:
    """Content item as seen by the publish hook."""

    content_id: int | str
    content_type: str
    main_language_code: str
    fields: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UrlAlias:
    """URL alias pointing at a content item."""

    content_id: int | str
    path: str
    language_code: str
    is_custom: bool = True
    forwarding: bool = False
    always_available: bool = True


# --- Input / Output ---


@dataclass(frozen=True)
class BuildAliasInput:
    """Input for building an alias path without storing it."""

    title: str
    content_type: str
    market: str = "global"


@dataclass(frozen=True)
class AliasOutput:
    path: str | None
    created: bool = False
