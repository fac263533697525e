"""Logging configuration tests."""

from __future__ import annotations

import logging
from pathlib import Path

from rulegov.logging import configure_logging, get_logger


def test_get_logger_nests_under_rulegov() -> None:
    assert get_logger().name == "rulegov"
    assert get_logger("sources").name == "rulegov.sources"


def test_quiet_console_raises_threshold() -> None:
    logger = configure_logging(quiet=True)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_verbose_wins_over_quiet() -> None:
    logger = configure_logging(verbose=True, quiet=True)
    assert logger.level == logging.DEBUG


def test_repeated_configuration_replaces_handlers() -> None:
    configure_logging()
    logger = configure_logging()
    assert len(logger.handlers) == 1


def test_log_file_records_debug_and_creates_parent(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "rulegov.log"
    configure_logging(quiet=True, log_file=log_file)

    get_logger("test").debug("collected %d documents", 3)
    for handler in logging.getLogger("rulegov").handlers:
        handler.flush()

    assert "collected 3 documents" in log_file.read_text(encoding="utf-8")
