from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.corpus_builder import CorpusBuilder

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def corpus_builder(tmp_path: Path) -> CorpusBuilder:
    """Provide a reusable corpus builder rooted at the pytest tmp_path."""
    return CorpusBuilder(tmp_path)


@pytest.fixture
def now() -> datetime:
    """Fixed clock so day arithmetic is reproducible."""
    return NOW


@pytest.fixture(autouse=True)
def _reset_rulegov_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so later tests do not write to closed streams."""
    yield
    logger = logging.getLogger("rulegov")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
