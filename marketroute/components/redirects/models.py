"""
Redirects component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class RedirectKind(str, Enum):
    """Redirect kind as stored on a redirect record."""

    PERMANENT = "permanent"
    TEMPORARY = "temporary"


# --- Errors ---


class RedirectLookupError(Exception):
    """Raised when the redirect store cannot be queried."""

    def __init__(self, path: str, message: str | None = None) -> None:
        self.path = path
        super().__init__(message or f"Redirect lookup failed for '{path}'")


@dataclass(frozen=True)
class RedirectValidationError:
    """Redirect validation error."""

    code: str
    message: str
    field: str | None = None


# --- Redirect Record (external) ---


@dataclass(frozen=True)
class RedirectRecord:
    """Redirect content item as read from the content store."""

    id: int
    source_url: str
    target_url: str | None
    redirect_type: Any  # RedirectKind | 0/1 | 301/302 | "301"/"302" | anything
    active: bool
    published_at: datetime


@dataclass(frozen=True)
class RedirectDecision:
    """Where to send the client, and how."""

    target_url: str
    status_code: int


# --- Input Models ---


@dataclass(frozen=True)
class ResolveRedirectInput:
    """Input for resolving a request path."""

    path: str


@dataclass(frozen=True)
class ListRedirectsInput:
    """Input for listing active redirects."""

    limit: int | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ResolveOutput:
    """Output for resolve operation."""

    decision: RedirectDecision | None
    errors: list[RedirectValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class RedirectListOutput:
    """Output containing active redirects, newest first."""

    redirects: tuple[RedirectRecord, ...]
    errors: list[RedirectValidationError] = field(default_factory=list)
    success: bool = True
