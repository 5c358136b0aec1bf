import logging
import sqlite3
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from marketroute.components.redirects import RedirectRecord, as_utc

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS redirects (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    source_url TEXT NOT NULL,
    target_url TEXT,
    redirect_type TEXT,
    active INTEGER NOT NULL DEFAULT 1,
    published_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_redirects_source_active
    ON redirects (source_url, active, published_at);
"""


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def _encode_timestamp(value: datetime) -> str:
    # Fixed-width UTC text so ORDER BY published_at sorts chronologically
    return as_utc(value).isoformat(timespec="microseconds")


def _encode_type(redirect_type: Any) -> str | None:
    if redirect_type is None:
        return None
    if isinstance(redirect_type, Enum):
        return str(redirect_type.value)
    return str(redirect_type)


class SQLiteRedirectStore:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def init_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.executescript(SCHEMA)
            conn.commit()
        finally:
            conn.close()

    def add(
        self,
        source_url: str,
        target_url: str | None,
        redirect_type: Any = 0,
        active: bool = True,
        published_at: datetime | None = None,
    ) -> RedirectRecord:
        published = as_utc(published_at or datetime.now(UTC))
        conn = self._get_conn()
        try:
            cur = conn.execute(
                """
                INSERT INTO redirects (source_url, target_url, redirect_type, active, published_at)
                VALUES (?, ?, ?, ?, ?)
            """,
                (source_url, target_url, _encode_type(redirect_type), int(active), _encode_timestamp(published)),
            )
            conn.commit()
            new_id = cur.lastrowid
        finally:
            conn.close()

        logger.debug("Stored redirect %s: %s -> %s", new_id, source_url, target_url)
        return RedirectRecord(
            id=int(new_id or 0),
            source_url=source_url,
            target_url=target_url,
            redirect_type=_encode_type(redirect_type),
            active=active,
            published_at=published,
        )

    def set_active(self, redirect_id: int, active: bool) -> None:
        conn = self._get_conn()
        try:
            conn.execute("UPDATE redirects SET active = ? WHERE id = ?", (int(active), redirect_id))
            conn.commit()
        finally:
            conn.close()

    def find_active_by_source(self, source_url: str) -> RedirectRecord | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                """
                SELECT * FROM redirects
                WHERE source_url = ? AND active = 1
                ORDER BY published_at DESC, id DESC
                LIMIT 1
            """,
                (source_url,),
            ).fetchone()
            if not row:
                return None
            return self._map_row(row)
        finally:
            conn.close()

    def list_active(self, limit: int) -> list[RedirectRecord]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                """
                SELECT * FROM redirects
                WHERE active = 1
                ORDER BY published_at DESC, id DESC
                LIMIT ?
            """,
                (limit,),
            ).fetchall()
            return [self._map_row(r) for r in rows]
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> RedirectRecord:
        return RedirectRecord(
            id=int(row["id"]),
            source_url=row["source_url"],
            target_url=row["target_url"],
            redirect_type=row["redirect_type"],
            active=bool(row["active"]),
            published_at=as_utc(datetime.fromisoformat(row["published_at"])),
        )
