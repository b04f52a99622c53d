"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.infrastructure.config import DEFAULT_LEGACY_QUOTA_BYTES, load_config


class TestLoadConfig:

    def test_defaults(self):
        config = load_config(env={})
        assert config.debounce_seconds == 1.0
        assert config.durable_quota_bytes is None
        assert config.legacy_quota_bytes == DEFAULT_LEGACY_QUOTA_BYTES
        assert config.payment_delay_seconds == 2.0
        assert config.log_level == "INFO"

    def test_environment_values_are_cast(self, tmp_path):
        config = load_config(env={
            "STOREFRONT_DATA_DIR": str(tmp_path),
            "STOREFRONT_DEBOUNCE_SECONDS": "0.25",
            "STOREFRONT_DURABLE_QUOTA_BYTES": "1000",
            "STOREFRONT_LOG_LEVEL": "DEBUG",
        })
        assert config.data_dir == tmp_path
        assert config.debounce_seconds == 0.25
        assert config.durable_quota_bytes == 1000
        assert config.log_level == "DEBUG"

    def test_overrides_win_over_environment(self, tmp_path):
        config = load_config(
            env={"STOREFRONT_DATA_DIR": "/nowhere"},
            data_dir=str(tmp_path),
            debounce_seconds=None,
        )
        assert config.data_dir == tmp_path
        assert config.debounce_seconds == 1.0

    def test_derived_paths(self, tmp_path):
        config = load_config(env={}, data_dir=tmp_path)
        assert config.durable_db_path == tmp_path / "site_data.sqlite3"
        assert config.legacy_store_path == tmp_path / "local_storage.json"
        assert config.log_dir == tmp_path / "logs"

    def test_tilde_is_expanded(self):
        config = load_config(env={}, data_dir="~/shop")
        assert config.data_dir == Path.home() / "shop"

    def test_bad_number_rejected(self):
        with pytest.raises(ValidationError, match="STOREFRONT_DEBOUNCE_SECONDS"):
            load_config(env={"STOREFRONT_DEBOUNCE_SECONDS": "soon"})

    def test_negative_debounce_rejected(self):
        with pytest.raises(ValidationError):
            load_config(env={"STOREFRONT_DEBOUNCE_SECONDS": "-1"})
