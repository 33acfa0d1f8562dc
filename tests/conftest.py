from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from interface_docs.diagnostics import DiagnosticCollector
from tests._fixtures.builders import SourceBuilder


@pytest.fixture
def diagnostics() -> DiagnosticCollector:
    """Collect diagnostics emitted during a test."""
    return DiagnosticCollector()


@pytest.fixture
def source_builder(tmp_path: Path) -> SourceBuilder:
    """Provide a source builder rooted at the pytest tmp_path."""
    return SourceBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers the CLI attaches so they do not outlive captured streams."""
    yield
    logger = logging.getLogger("interface_docs")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
