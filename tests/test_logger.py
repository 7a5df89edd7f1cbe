"""Tests for the JSON logger."""

import json
import logging
from logging.handlers import RotatingFileHandler
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from core.logger import BotwireLogger, _JsonFormatter


class TestJsonFormatter:
    """Validate structured output."""

    def test_extra_fields_merged(self) -> None:
        record = logging.LogRecord(
            name="botwire.transport", level=logging.WARNING, pathname=__file__, lineno=1,
            msg="API call failed", args=(), exc_info=None,
        )
        record.api_method = "sendMessage"
        entry = json.loads(_JsonFormatter().format(record))
        assert entry["message"] == "API call failed"
        assert entry["level"] == "WARNING"
        assert entry["api_method"] == "sendMessage"


class TestBotwireLogger:
    def test_singleton(self) -> None:
        assert BotwireLogger.get_logger() is BotwireLogger.get_logger()
        assert BotwireLogger.get_logger().name == "botwire"

    def test_child(self) -> None:
        assert BotwireLogger.get_child("files").name == "botwire.files"

    def test_add_file_handler_once(self, tmp_path) -> None:
        logger = BotwireLogger.get_logger()
        instance = BotwireLogger()
        try:
            instance.add_file_handler(str(tmp_path))
            instance.add_file_handler(str(tmp_path))
            handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
            assert [h.baseFilename for h in handlers] == [str(tmp_path / "botwire.log")]
        finally:
            _remove_file_handlers(logger)


def _remove_file_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            handler.close()
            logger.removeHandler(handler)
