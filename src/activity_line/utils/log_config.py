"""Logging setup for activity-line.

Stdout carries the status line itself, so diagnostics only ever go to a
rotating log file or to stderr.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from activity_line.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_MAX_SIZE_MB,
    PACKAGE_LOGGER_NAME,
)

_BYTES_PER_MB = 1024 * 1024


def configure_logging(
    log_level: str,
    log_file: Path | None = None,
    max_size_mb: int = DEFAULT_LOG_MAX_SIZE_MB,
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
) -> logging.Logger:
    """Configure the package logger.

    Safe to call more than once; existing handlers are replaced.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional log file path. Logs go to stderr when unset.
        max_size_mb: Size at which the log file is rotated.
        backup_count: Number of rotated files to keep.

    Returns:
        The configured package logger.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    # Keep records away from the root logger and any host configuration
    package_logger.propagate = False
    package_logger.handlers.clear()

    if level == logging.DEBUG:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    handler: logging.Handler | None = None
    file_error: OSError | None = None
    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                log_file,
                mode="a",
                maxBytes=max_size_mb * _BYTES_PER_MB,
                backupCount=backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            file_error = e

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(formatter)
    package_logger.addHandler(handler)

    if file_error is not None:
        package_logger.warning(f"Could not set up file logging to {log_file}: {file_error}")

    return package_logger
