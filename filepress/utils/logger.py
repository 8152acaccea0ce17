"""
Application logging for filepress.

A singleton logger with a console handler on stderr (bare one-line
diagnostics) and an optional file handler with location tracking.
"""

import logging
import sys
import threading
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


# Custom level between INFO and WARNING
NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")


# ============================================================================
# Formatters
# ============================================================================


class DetailedFormatter(logging.Formatter):
    """Formatter with location tracking (module:function:line)."""

    def format(self, record: logging.LogRecord) -> str:
        record.location = f"{record.module}:{record.funcName}:{record.lineno}"
        return super().format(record)


# ============================================================================
# Singleton Logger
# ============================================================================


class FilePressLogger:
    """
    Thread-safe singleton logger for filepress.

    Features:
    - Console output on stderr, message text only
    - Optional file output with timestamps and code locations
    - Optional size-based log rotation
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        """Ensure only one instance exists (thread-safe singleton)."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if getattr(self, "_initialized", False):
            return

        self._initialized = True
        self._logger = logging.getLogger("filepress")
        self._logger.setLevel(logging.WARNING)
        self._logger.propagate = False

        self._console_handler: Optional[logging.Handler] = None
        self._file_handler: Optional[logging.Handler] = None
        self._log_dir: Optional[Path] = None

        self._cleanup_handlers()

    def configure(
        self,
        log_level: str = "WARNING",
        log_dir: Optional[str] = None,
        enable_console: bool = True,
        rotation_enabled: bool = False,
        max_bytes: int = 1048576,  # 1 MB
        backup_count: int = 3,
    ) -> None:
        """
        Configure the logger with specified settings.

        Args:
            log_level: Logging level (DEBUG, INFO, NOTICE, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files; file logging is off when None
            enable_console: Enable console output on stderr
            rotation_enabled: Rotate the log file by size
            max_bytes: Max bytes before rotation
            backup_count: Number of rotated files to keep
        """
        self._cleanup_handlers()
        self._console_handler = None
        self._file_handler = None
        self._log_dir = None

        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
        self._logger.setLevel(level)

        if enable_console:
            # Bound to the current sys.stderr so redirected streams are honoured
            self._console_handler = logging.StreamHandler(sys.stderr)
            self._console_handler.setLevel(level)
            self._console_handler.setFormatter(logging.Formatter(fmt="%(message)s"))
            self._logger.addHandler(self._console_handler)

        if log_dir is not None:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            self._log_dir = log_path

            log_file = log_path / f"filepress_{datetime.now().strftime('%Y%m%d')}.log"
            if rotation_enabled:
                self._file_handler = RotatingFileHandler(
                    log_file,
                    maxBytes=max_bytes,
                    backupCount=backup_count,
                    encoding="utf-8",
                    delay=True,
                )
            else:
                self._file_handler = logging.FileHandler(log_file, encoding="utf-8", delay=True)

            # The file records everything at DEBUG, including tracebacks
            self._file_handler.setLevel(logging.DEBUG)
            self._logger.setLevel(logging.DEBUG)
            self._file_handler.setFormatter(
                DetailedFormatter(
                    fmt="%(asctime)s [%(levelname)s] [%(location)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            self._logger.addHandler(self._file_handler)

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance."""
        return self._logger

    @property
    def log_dir(self) -> Optional[Path]:
        return self._log_dir

    def _cleanup_handlers(self) -> None:
        """Close and remove all handlers from the logger."""
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            # StreamHandler.close() leaves the wrapped stream open
            handler.close()

    @staticmethod
    def _caller(kwargs: dict) -> dict:
        """Attribute records to the code calling these wrappers, not to this module."""
        kwargs.setdefault("stacklevel", 2)
        return kwargs

    # Convenience methods

    def critical(self, msg: str, *args, **kwargs) -> None:
        self._logger.critical(msg, *args, **self._caller(kwargs))

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **self._caller(kwargs))

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **self._caller(kwargs))

    def notice(self, msg: str, *args, **kwargs) -> None:
        """Log notice message (normal but significant condition)."""
        self._logger.log(NOTICE, msg, *args, **self._caller(kwargs))

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **self._caller(kwargs))

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **self._caller(kwargs))


# ============================================================================
# Global Logger Instance
# ============================================================================


def get_logger() -> FilePressLogger:
    """
    Get the global FilePressLogger instance.

    Returns:
        Singleton FilePressLogger instance
    """
    return FilePressLogger()
