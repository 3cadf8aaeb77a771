"""
Logging setup for the autocompleter entry points.

Library modules only create loggers:
    import logging
    logger = logging.getLogger(__name__)

The CLI and the API server call :func:`setup_logging` once at start-up.
Console output goes to stderr so CLI results on stdout stay parseable.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

PACKAGE_LOGGER = "autocompleter"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation policy for the log file
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def _resolve_level(level: int | str) -> int:
    """Accept either a logging constant or a name such as ``"debug"``."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _file_handler(log_dir: Path, log_file: str) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        filename=log_dir / log_file,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )


def setup_logging(
    log_dir: Path | None = None,
    level: int | str = logging.INFO,
    log_file: str = "autocompleter.log",
) -> logging.Logger:
    """
    Attach console (and optionally rotating file) handlers to the package logger.

    Args:
        log_dir: Directory for the log file. None means console only.
        level: Minimum level, as a ``logging`` constant or a level name.
        log_file: File name inside *log_dir*.

    Returns the package logger. Calling again only updates the level; the
    handlers from the first call stay in place.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(_resolve_level(level))
    if package_logger.handlers:
        return package_logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    package_logger.addHandler(console)

    if log_dir is not None:
        try:
            file_handler = _file_handler(log_dir, log_file)
        except OSError as e:
            package_logger.warning("Could not set up file logging in %s: %s", log_dir, e)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
    return package_logger


def reset_logging() -> None:
    """Detach and close every handler added by :func:`setup_logging`."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
