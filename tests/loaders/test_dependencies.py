"""Tests for the dependency graph loader."""

from __future__ import annotations

import pytest

from reportagg.errors import ReportMissingError, ReportParseError
from reportagg.loaders.dependencies import DependencyGraphLoader
from reportagg.models import DependencyEntry
from tests._fixtures.report_builder import deps


def test_dependency_loader_uses_strict_threshold(reports) -> None:
    reports.dependency_graph(
        {
            "src/App.js": deps(11),
            "src/index.js": deps(10),
            "src/utils/time.js": [],
        }
    )

    targets = DependencyGraphLoader().load(reports.config())

    assert targets == [DependencyEntry(module_name="src/App.js", dependency_count=11)]


def test_dependency_loader_preserves_report_order(reports) -> None:
    reports.dependency_graph({"z.js": deps(12), "a.js": deps(20)})

    targets = DependencyGraphLoader().load(reports.config())

    assert [target.module_name for target in targets] == ["z.js", "a.js"]


def test_dependency_loader_reports_missing_file(reports) -> None:
    with pytest.raises(ReportMissingError):
        DependencyGraphLoader().load(reports.config())


@pytest.mark.parametrize("payload", [["a.js"], {"a.js": "b.js"}, {"a.js": None}])
def test_dependency_loader_rejects_unexpected_shapes(reports, payload) -> None:
    reports.write_json("dependency-graph.json", payload)

    with pytest.raises(ReportParseError):
        DependencyGraphLoader().load(reports.config())
