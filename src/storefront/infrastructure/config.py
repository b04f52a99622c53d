"""Configuration for the storefront engine.

Loading priority (highest first):
1. Explicit overrides (CLI flags)
2. Environment variables (``STOREFRONT_*``)
3. Defaults below
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from storefront.domain.exceptions import ValidationError

DEFAULT_DATA_DIR = Path.home() / ".storefront"
DEFAULT_LEGACY_QUOTA_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class StorefrontConfig:

    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)
    debounce_seconds: float = 1.0
    durable_quota_bytes: int | None = None   # None = limited only by disk
    legacy_quota_bytes: int = DEFAULT_LEGACY_QUOTA_BYTES
    payment_delay_seconds: float = 2.0
    log_level: str = "INFO"

    @property
    def durable_db_path(self) -> Path:
        return self.data_dir / "site_data.sqlite3"

    @property
    def legacy_store_path(self) -> Path:
        return self.data_dir / "local_storage.json"

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"


_ENV_FIELDS: dict[str, tuple[str, type]] = {
    "STOREFRONT_DATA_DIR": ("data_dir", Path),
    "STOREFRONT_DEBOUNCE_SECONDS": ("debounce_seconds", float),
    "STOREFRONT_DURABLE_QUOTA_BYTES": ("durable_quota_bytes", int),
    "STOREFRONT_LEGACY_QUOTA_BYTES": ("legacy_quota_bytes", int),
    "STOREFRONT_PAYMENT_DELAY_SECONDS": ("payment_delay_seconds", float),
    "STOREFRONT_LOG_LEVEL": ("log_level", str),
}


def load_config(
    env: dict[str, str] | None = None,
    **overrides: Any,
) -> StorefrontConfig:
    """Build a config from the environment plus any non-None overrides."""
    env = os.environ if env is None else env
    values: dict[str, Any] = {}

    for var, (name, cast) in _ENV_FIELDS.items():
        raw = env.get(var)
        if raw is None or raw == "":
            continue
        try:
            values[name] = cast(raw)
        except ValueError as exc:
            raise ValidationError(f"Invalid value for {var}: {raw!r}") from exc

    values.update({k: v for k, v in overrides.items() if v is not None})
    if "data_dir" in values:
        values["data_dir"] = Path(values["data_dir"]).expanduser()

    config = replace(StorefrontConfig(), **values)
    if config.debounce_seconds < 0:
        raise ValidationError("debounce_seconds cannot be negative")
    return config
