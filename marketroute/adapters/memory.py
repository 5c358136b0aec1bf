"""
In-memory adapters for the content-store ports.

Used by the dev app and tests. Lookups mirror the store contracts:
exact source match, active only, newest publish first.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from marketroute.components.aliases import UrlAlias
from marketroute.components.languages import TranslationSet
from marketroute.components.redirects import RedirectRecord, as_utc, select_latest


class InMemoryRedirectStore:
    """In-memory redirect store."""

    def __init__(self, records: list[RedirectRecord] | None = None) -> None:
        self._records: dict[int, RedirectRecord] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        for record in records or []:
            self.save(record)

    def save(self, record: RedirectRecord) -> RedirectRecord:
        record = replace(record, published_at=as_utc(record.published_at))
        with self._lock:
            self._records[record.id] = record
        return record

    def add(
        self,
        source_url: str,
        target_url: str | None,
        redirect_type: Any = 0,
        active: bool = True,
        published_at: datetime | None = None,
    ) -> RedirectRecord:
        with self._lock:
            new_id = next(self._ids)
            while new_id in self._records:
                new_id = next(self._ids)
            record = RedirectRecord(
                id=new_id,
                source_url=source_url,
                target_url=target_url,
                redirect_type=redirect_type,
                active=active,
                published_at=as_utc(published_at or datetime.now(UTC)),
            )
            self._records[new_id] = record
        return record

    def delete(self, redirect_id: int) -> None:
        with self._lock:
            self._records.pop(redirect_id, None)

    def clear(self) -> None:
        """Clear all redirects (for testing)."""
        with self._lock:
            self._records.clear()

    def find_active_by_source(self, source_url: str) -> RedirectRecord | None:
        with self._lock:
            matches = [r for r in self._records.values() if r.active and r.source_url == source_url]
        return select_latest(matches)

    def list_active(self, limit: int) -> list[RedirectRecord]:
        with self._lock:
            active = [r for r in self._records.values() if r.active]
        active.sort(key=lambda r: (r.published_at, r.id), reverse=True)
        return active[:limit]


class InMemoryTranslationStore:
    """In-memory translation query adapter."""

    def __init__(self) -> None:
        self._sets: dict[int | str, TranslationSet] = {}

    def put(self, translations: TranslationSet) -> TranslationSet:
        self._sets[translations.content_id] = translations
        return translations

    def get_translation_set(self, content_id: int | str) -> TranslationSet | None:
        return self._sets.get(content_id)


class InMemoryAliasStore:
    """In-memory URL alias store."""

    def __init__(self) -> None:
        self._aliases: list[UrlAlias] = []

    def list_aliases(self, content_id: int | str, language_code: str) -> list[UrlAlias]:
        return [
            a
            for a in self._aliases
            if a.content_id == content_id and a.language_code == language_code
        ]

    def create_alias(
        self,
        content_id: int | str,
        path: str,
        language_code: str,
        forwarding: bool = False,
        always_available: bool = True,
    ) -> UrlAlias:
        alias = UrlAlias(
            content_id=content_id,
            path=path,
            language_code=language_code,
            is_custom=True,
            forwarding=forwarding,
            always_available=always_available,
        )
        self._aliases.append(alias)
        return alias

    def all(self) -> list[UrlAlias]:
        return list(self._aliases)
