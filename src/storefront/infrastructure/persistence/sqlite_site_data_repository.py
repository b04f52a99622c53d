"""SQLite-backed implementation of SiteDataRepository.

One table, one row: the whole document is stored as JSON text under a
fixed key. The schema is provisioned on first use and tracked with
``PRAGMA user_version``. sqlite3 is blocking, so every call is pushed
to a worker thread to keep the event loop responsive.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from pathlib import Path

from storefront.domain.exceptions import (
    LoadError,
    QuotaExceededError,
    SaveError,
    StorageUnavailableError,
)
from storefront.domain.model.site_data import SiteData
from storefront.domain.repository.site_data_repository import SiteDataRepository
from storefront.infrastructure.persistence import document_codec

logger = logging.getLogger(__name__)

DB_VERSION = 1
TABLE_NAME = "site_data_store"
DATA_KEY = "currentSiteData"

_MIGRATIONS: dict[int, str] = {
    1: f"""
        CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        );
    """,
}


class SqliteSiteDataRepository(SiteDataRepository):

    def __init__(self, db_path: Path, max_bytes: int | None = None) -> None:
        self._db_path = db_path
        self._max_bytes = max_bytes
        self._provisioned = False
        self._unavailable: StorageUnavailableError | None = None

    # --- SiteDataRepository interface -----------------------------------------

    async def load(self) -> SiteData | None:
        text = await asyncio.to_thread(self._read)
        if text is None:
            return None
        try:
            return document_codec.loads(text)
        except ValueError as exc:
            raise LoadError(f"Stored site data is unreadable: {exc}") from exc

    async def save(self, site_data: SiteData) -> None:
        text = document_codec.dumps(site_data)
        size = len(text.encode("utf-8"))
        if self._max_bytes is not None and size > self._max_bytes:
            raise QuotaExceededError(
                f"Site data is {size} bytes, over the {self._max_bytes} byte quota. "
                f"{QuotaExceededError.hint}"
            )
        await asyncio.to_thread(self._write, text)
        logger.debug("Saved site data (%d bytes)", size)

    # --- Blocking helpers (run in a worker thread) ----------------------------

    def _read(self) -> str | None:
        conn = self._connect()
        try:
            row = conn.execute(
                f"SELECT value FROM {TABLE_NAME} WHERE key = ?", (DATA_KEY,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise LoadError(f"Failed to read site data: {exc}") from exc
        finally:
            conn.close()
        return row[0] if row else None

    def _write(self, text: str) -> None:
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    f"""
                    INSERT INTO {TABLE_NAME} (key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value
                    """,
                    (DATA_KEY, text),
                )
        except sqlite3.Error as exc:
            if _is_disk_full(exc):
                raise QuotaExceededError(
                    f"Storage is full. {QuotaExceededError.hint}"
                ) from exc
            raise SaveError(f"Failed to save site data: {exc}") from exc
        finally:
            conn.close()

    def _connect(self) -> sqlite3.Connection:
        if self._unavailable is not None:
            raise self._unavailable
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self._db_path)
        except (OSError, sqlite3.Error) as exc:
            self._unavailable = StorageUnavailableError(
                f"Cannot open durable store at {self._db_path}: {exc}"
            )
            raise self._unavailable from exc
        if not self._provisioned:
            self._provision(conn)
        return conn

    def _provision(self, conn: sqlite3.Connection) -> None:
        """Apply any schema steps newer than the database's user_version."""
        try:
            current = conn.execute("PRAGMA user_version").fetchone()[0]
            if current > DB_VERSION:
                raise StorageUnavailableError(
                    f"Durable store version {current} is newer than supported {DB_VERSION}"
                )
            for version in range(current + 1, DB_VERSION + 1):
                logger.info("Provisioning durable store schema v%d", version)
                conn.executescript(_MIGRATIONS[version])
                conn.execute(f"PRAGMA user_version = {version}")
                conn.commit()
        except sqlite3.Error as exc:
            conn.close()
            self._unavailable = StorageUnavailableError(
                f"Cannot provision durable store at {self._db_path}: {exc}"
            )
            raise self._unavailable from exc
        except StorageUnavailableError as exc:
            conn.close()
            self._unavailable = exc
            raise
        self._provisioned = True


def _is_disk_full(exc: sqlite3.Error) -> bool:
    return "full" in str(exc).lower()
