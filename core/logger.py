"""BotwireLogger — Singleton JSON logger with console and optional rotating file output.

Provides a single, project-wide logger instance that writes structured JSON to
stdout and, when a log directory is configured, to ``<log_dir>/botwire.log``
with automatic rotation.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional


class _JsonFormatter(logging.Formatter):
    """Format every log record as a single-line JSON object.

    Standard fields (timestamp, level, logger, message, module, func_name)
    are always present.  Any *extra* key-value pairs passed via the ``extra``
    parameter of a logging call are merged into the JSON object, so callers
    can attach request context such as ``api_method`` or ``file_id``.

    Example::

        logger.debug("Calling API", extra={"api_method": "sendMessage", "upload": False})

    Produces::

        {"timestamp": "…", "level": "DEBUG", …, "api_method": "sendMessage", "upload": false}
    """

    # Keys that belong to the standard LogRecord; everything else is extra.
    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    )))

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }

        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in log_entry:
                log_entry[key] = value

        if record.exc_info:
            log_entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class BotwireLogger:
    """Singleton logger with a console handler and an optional rotating file.

    Usage::

        from core.logger import BotwireLogger

        logger = BotwireLogger.get_logger()
        logger.info("Client ready")
    """

    _instance: Optional["BotwireLogger"] = None
    _logger: Optional[logging.Logger] = None

    _LOGGER_NAME: str = "botwire"
    _LOG_FILE: str = "botwire.log"
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: int = logging.INFO, log_dir: str | None = None) -> "BotwireLogger":
        """Ensure only one instance is ever created (Singleton)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level, log_dir)
        return cls._instance

    # ------------------------------------------------------------------
    # Initialisation helpers
    # ------------------------------------------------------------------

    def _init_logger(self, level: int, log_dir: str | None) -> None:
        """Create the underlying :class:`logging.Logger` and attach handlers."""
        self._logger = logging.getLogger(self._LOGGER_NAME)
        self._logger.setLevel(level)

        # Avoid duplicate handlers if the module is reloaded.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        if log_dir is None:
            log_dir = os.environ.get("BOTWIRE_LOG_DIR")
        if log_dir:
            self.add_file_handler(log_dir)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @staticmethod
    def get_logger(level: int = logging.INFO) -> logging.Logger:
        """Return the shared :class:`logging.Logger` instance.

        Creates the singleton on first call; subsequent calls return the
        same logger regardless of the *level* argument.
        """
        instance = BotwireLogger(level)
        assert instance._logger is not None  # guaranteed by __new__
        return instance._logger

    @staticmethod
    def get_child(name: str) -> logging.Logger:
        """Return a child of the shared logger, e.g. ``botwire.transport``."""
        return BotwireLogger.get_logger().getChild(name)

    def add_file_handler(self, log_dir: str) -> None:
        """Also write to a rotating ``<log_dir>/botwire.log``.

        Called once more for a directory that is already attached, this is a no-op.
        """
        assert self._logger is not None
        path = os.path.abspath(os.path.join(log_dir, self._LOG_FILE))
        for handler in self._logger.handlers:
            if isinstance(handler, RotatingFileHandler) and handler.baseFilename == path:
                return

        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=self._MAX_BYTES,
            backupCount=self._BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(self._logger.level)
        file_handler.setFormatter(_JsonFormatter())
        self._logger.addHandler(file_handler)

    def cleanup(self) -> None:
        """Flush and close all handlers attached to the logger."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)
