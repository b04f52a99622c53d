"""Structured JSON logging for the storefront engine.

Every module logs through ``logging.getLogger(__name__)``; this module
only configures the shared ``storefront`` logger once per process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

ROOT_LOGGER = "storefront"


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "data"):
            entry["data"] = record.data  # type: ignore[attr-defined]
        if record.exc_info and record.exc_info[1]:
            entry["error"] = str(record.exc_info[1])
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(
    level: int | str = logging.INFO,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Configure the ``storefront`` logger.

    Args:
        level: Logging level for the file handler and the logger itself.
        log_dir: Directory for a JSON-lines log file. If None, logs go
            to stderr only.

    Returns:
        The root 'storefront' logger.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    fmt = JSONFormatter()

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / "storefront.jsonl", encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(level)
        logger.addHandler(fh)

    # Stderr handler (only warnings+ unless running verbose)
    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    sh.setLevel(logging.DEBUG if logger.level <= logging.DEBUG else logging.WARNING)
    logger.addHandler(sh)

    return logger
