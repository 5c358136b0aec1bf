"""
RedirectService - content-driven redirect resolution.

Key behaviors:
- Source paths match exactly (no normalization, no wildcards)
- Newest published active record wins when several share a source
- Permanent -> 301, everything else (including unknown kinds) -> 302
- Empty or missing targets never redirect; the request falls through
- resolve() surfaces store failures, resolve_safely() logs and swallows them
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from .models import RedirectDecision, RedirectKind, RedirectLookupError, RedirectRecord
from .ports import RedirectStorePort

logger = logging.getLogger(__name__)

MAX_LIST_LIMIT = 1000

_PERMANENT_CODES = frozenset({"0", "301", "permanent"})


# --- Configuration ---


@dataclass(frozen=True)
class RedirectConfig:
    """Redirect configuration from routing rules."""

    list_limit: int = MAX_LIST_LIMIT


DEFAULT_CONFIG = RedirectConfig()


# --- Pure helpers ---


def kind_of(redirect_type: Any) -> RedirectKind:
    """
    Interpret a stored redirect type.

    Accepts the selection index (0 permanent, 1 temporary), HTTP codes as
    int or str, kind names, or a selection list. Anything unrecognised is
    temporary so a wrong value is never cached as permanent.
    """
    if isinstance(redirect_type, RedirectKind):
        return redirect_type
    if isinstance(redirect_type, (list, tuple)):
        return kind_of(redirect_type[0]) if redirect_type else RedirectKind.TEMPORARY
    if isinstance(redirect_type, bool) or redirect_type is None:
        return RedirectKind.TEMPORARY
    if isinstance(redirect_type, (int, str)):
        if str(redirect_type).strip().lower() in _PERMANENT_CODES:
            return RedirectKind.PERMANENT
    return RedirectKind.TEMPORARY


def status_code_for(kind: RedirectKind) -> int:
    return 301 if kind is RedirectKind.PERMANENT else 302


def as_utc(value: datetime) -> datetime:
    """Aware UTC datetime; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _recency(record: RedirectRecord) -> tuple[datetime, int]:
    return as_utc(record.published_at), record.id


def select_latest(records: Iterable[RedirectRecord]) -> RedirectRecord | None:
    """Pick the most recently published record (higher id breaks ties)."""
    latest: RedirectRecord | None = None
    for record in records:
        if latest is None or _recency(record) > _recency(latest):
            latest = record
    return latest


def build_decision(record: RedirectRecord) -> RedirectDecision | None:
    """
    Build a redirect decision from a record.

    Returns None for an empty target so the caller falls through to
    normal routing instead of redirecting to nowhere.
    """
    target = (record.target_url or "").strip()
    if not target:
        logger.warning(
            "Redirect %s for '%s' has an empty target; ignoring",
            record.id,
            record.source_url,
        )
        return None

    return RedirectDecision(
        target_url=target,
        status_code=status_code_for(kind_of(record.redirect_type)),
    )


# --- Redirect Service ---


class RedirectService:
    """
    Redirect service.

    Looks up active redirect records and turns them into decisions.
    """

    def __init__(
        self,
        store: RedirectStorePort,
        config: RedirectConfig | None = None,
    ) -> None:
        """Initialize service."""
        self._store = store
        self._config = config or DEFAULT_CONFIG

    def find_record(self, path: str) -> RedirectRecord | None:
        """
        Find the active record for an exact source path.

        Raises:
            RedirectLookupError: if the store fails.
        """
        try:
            record = self._store.find_active_by_source(path)
        except Exception as e:
            raise RedirectLookupError(path) from e

        if record is None or not record.active:
            return None

        return record

    def resolve(self, path: str) -> RedirectDecision | None:
        """
        Resolve a request path to a redirect decision.

        Store failures propagate as RedirectLookupError.
        """
        record = self.find_record(path)
        if record is None:
            return None

        return build_decision(record)

    def resolve_safely(self, path: str) -> RedirectDecision | None:
        """Resolve a path, treating store failures as "no redirect"."""
        try:
            return self.resolve(path)
        except RedirectLookupError:
            logger.exception("Redirect lookup failed for '%s'; continuing without redirect", path)
            return None

    def list_active(self, limit: int | None = None) -> list[RedirectRecord]:
        """
        List active redirects, newest publish first.

        The limit is capped at the configured maximum.
        """
        cap = min(self._config.list_limit, MAX_LIST_LIMIT)
        effective = cap if limit is None else max(0, min(limit, cap))

        try:
            records = self._store.list_active(effective)
        except Exception as e:
            raise RedirectLookupError("*", "Redirect listing failed") from e

        ordered = sorted(
            (r for r in records if r.active),
            key=_recency,
            reverse=True,
        )
        return ordered[:effective]


# --- Factory ---


def create_redirect_service(
    store: RedirectStorePort,
    config: RedirectConfig | None = None,
) -> RedirectService:
    """Create a RedirectService."""
    return RedirectService(store=store, config=config)
