"""JSON-file-backed implementation of KeyValueStore.

All keys live in a single JSON object on disk. The store enforces a
total size ceiling, mirroring the small quota of the legacy backend.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import QuotaExceededError, StorageUnavailableError
from storefront.domain.repository.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024


class JsonKeyValueStore(KeyValueStore):

    def __init__(self, file_path: Path, quota_bytes: int = DEFAULT_QUOTA_BYTES) -> None:
        self._file_path = file_path
        self._quota_bytes = quota_bytes

    # --- KeyValueStore interface ----------------------------------------------

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        entries = self._load()
        entries[key] = value
        size = _size_of(entries)
        if size > self._quota_bytes:
            raise QuotaExceededError(
                f"Storing '{key}' needs {size} bytes, over the {self._quota_bytes} byte quota"
            )
        self._persist(entries)

    def remove(self, key: str) -> None:
        entries = self._load()
        if entries.pop(key, None) is not None:
            self._persist(entries)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Legacy store %s is unreadable, treating as empty: %s", self._file_path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.error("Legacy store %s is not a JSON object, treating as empty", self._file_path)
            return {}
        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def _persist(self, entries: dict[str, str]) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(entries, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StorageUnavailableError(
                f"Cannot write legacy store {self._file_path}: {exc}"
            ) from exc


def _size_of(entries: dict[str, str]) -> int:
    return sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in entries.items())
