"""Tests for loader discovery."""

from __future__ import annotations

import pytest

from reportagg.loaders import (
    DependencyGraphLoader,
    LargeFileListLoader,
    LintReportLoader,
    discover_loaders,
)


def test_discover_loaders_returns_run_order() -> None:
    loaders = discover_loaders()

    assert [type(loader) for loader in loaders] == [
        LintReportLoader,
        DependencyGraphLoader,
        LargeFileListLoader,
    ]


def test_discover_loaders_filters_enabled_case_insensitively() -> None:
    loaders = discover_loaders(["LARGE_FILES", "lint"])

    assert [loader.name for loader in loaders] == ["lint", "large_files"]


def test_discover_loaders_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="complexity"):
        discover_loaders(["lint", "complexity"])
