"""Tests for reportagg.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from reportagg.aggregator import ReportAggregator
from reportagg.logging import configure_logging, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "reportagg"
    assert get_logger("aggregator").name == "reportagg.aggregator"


def test_configure_logging_does_not_stack_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_configure_logging_writes_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "reportagg.log"
    configure_logging(log_file=log_file)

    get_logger("aggregator").error("dependency graph unreadable")
    for handler in logging.getLogger("reportagg").handlers:
        handler.flush()

    assert "dependency graph unreadable" in log_file.read_text(encoding="utf-8")


def test_log_file_records_debug_steps_without_verbose(reports, capsys) -> None:
    log_file = reports.root / "reportagg.log"
    configure_logging(log_file=log_file)
    reports.large_files("450 src/big.js")

    ReportAggregator(reports.config()).run()
    for handler in logging.getLogger("reportagg").handlers:
        handler.flush()

    logged = log_file.read_text(encoding="utf-8")
    assert "large file list: kept 1 entries" in logged
    assert "kept 1 entries" not in capsys.readouterr().err
