"""Tests for JSON log formatting and logger setup."""

import json
import logging
import sys

import pytest

from storefront.infrastructure.log import ROOT_LOGGER, JSONFormatter, setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    saved = list(logger.handlers)
    for handler in saved:
        logger.removeHandler(handler)
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    for handler in saved:
        logger.addHandler(handler)


class TestJSONFormatter:

    def test_single_line_json_with_data(self):
        record = logging.LogRecord("storefront.x", logging.INFO, __file__, 1, "saved %d", (3,), None)
        record.data = {"bytes": 10}
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "storefront.x"
        assert entry["msg"] == "saved 3"
        assert entry["data"] == {"bytes": 10}

    def test_exception_text_included(self):
        try:
            raise RuntimeError("disk gone")
        except RuntimeError:
            record = logging.LogRecord(
                "storefront", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        entry = json.loads(JSONFormatter().format(record))
        assert entry["error"] == "disk gone"


class TestSetupLogging:

    def test_writes_json_lines_file(self, clean_logger, tmp_path):
        logger = setup_logging(level="DEBUG", log_dir=tmp_path)
        logging.getLogger("storefront.application.site_store").debug("hello")
        for handler in logger.handlers:
            handler.flush()
        lines = (tmp_path / "storefront.jsonl").read_text().splitlines()
        assert json.loads(lines[-1])["msg"] == "hello"

    def test_default_level_keeps_info_off_stderr(self, clean_logger, capsys):
        setup_logging(level="INFO")
        logging.getLogger("storefront.application.site_store").info("Site data ready")
        assert capsys.readouterr().err == ""
        logging.getLogger("storefront.application.site_store").warning("quota near")
        assert json.loads(capsys.readouterr().err)["level"] == "WARNING"

    def test_debug_level_sends_everything_to_stderr(self, clean_logger, capsys):
        setup_logging(level="DEBUG")
        logging.getLogger("storefront.application.site_store").debug("saved")
        assert json.loads(capsys.readouterr().err)["msg"] == "saved"

    def test_repeated_setup_does_not_duplicate_handlers(self, clean_logger, tmp_path):
        setup_logging(log_dir=tmp_path)
        count = len(clean_logger.handlers)
        setup_logging(log_dir=tmp_path)
        assert len(clean_logger.handlers) == count
