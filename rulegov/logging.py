"""Logging utilities for rulegov commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "rulegov"
_CONSOLE_FORMAT = "[rulegov] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the rulegov hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route rulegov logs to stderr and, optionally, a log file.

    ``verbose`` wins over ``quiet``. The file handler always records at
    DEBUG so a quiet console run still leaves a full trail on disk.
    """
    level = _level(verbose, quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is None:
        logger.setLevel(level)
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    logger.addHandler(file_handler)
    logger.setLevel(logging.DEBUG)
    return logger


__all__ = ["configure_logging", "get_logger"]
