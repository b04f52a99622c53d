"""Tests for the JSON-file key-value store."""

import json

import pytest

from storefront.domain.exceptions import QuotaExceededError
from storefront.infrastructure.persistence.json_key_value_store import JsonKeyValueStore


class TestJsonKeyValueStore:

    def test_missing_file_reads_empty(self, tmp_path):
        assert JsonKeyValueStore(tmp_path / "store.json").get("anything") is None

    def test_set_get_remove(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        store = JsonKeyValueStore(path)
        store.set("a", "1")
        store.set("b", "2")
        assert JsonKeyValueStore(path).get("a") == "1"
        store.remove("a")
        assert store.get("a") is None
        assert json.loads(path.read_text()) == {"b": "2"}

    def test_remove_missing_key_is_noop(self, tmp_path):
        path = tmp_path / "store.json"
        JsonKeyValueStore(path).remove("ghost")
        assert not path.exists()

    def test_quota_rejects_write_and_keeps_old_value(self, tmp_path):
        store = JsonKeyValueStore(tmp_path / "store.json", quota_bytes=20)
        store.set("k", "small")
        with pytest.raises(QuotaExceededError):
            store.set("k", "x" * 50)
        assert store.get("k") == "small"

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{broken")
        store = JsonKeyValueStore(path)
        assert store.get("a") is None
        store.set("a", "fresh")
        assert store.get("a") == "fresh"

    def test_non_string_values_are_ignored(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"a": 1, "b": "ok"}))
        store = JsonKeyValueStore(path)
        assert store.get("a") is None
        assert store.get("b") == "ok"
