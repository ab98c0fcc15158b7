from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.report_builder import ReportBuilder


@pytest.fixture
def reports(tmp_path: Path) -> ReportBuilder:
    """Provide a report workspace rooted at the pytest tmp_path."""
    return ReportBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_reportagg_logger() -> Iterator[None]:
    """Undo configure_logging so caplog sees records in every test."""
    yield
    logger = logging.getLogger("reportagg")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
