"""Helper utilities for laying out analysis reports in tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any, Mapping

from reportagg.config import AggregatorConfig


class ReportBuilder:
    """Writes report files into a throwaway workspace and builds configs for it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "workspace"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the workspace."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")

    def write_json(self, relative: str, payload: Any) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def lint_report(self, records: list[dict[str, Any]]) -> Path:
        return self.write_json("eslint-report.json", records)

    def dependency_graph(self, graph: dict[str, list[str]]) -> Path:
        return self.write_json("dependency-graph.json", graph)

    def large_files(self, *lines: str) -> Path:
        path = self.root / "large-files.txt"
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    def config(self) -> AggregatorConfig:
        return AggregatorConfig.defaults(self.root)

    def output(self) -> Path:
        return self.root / "comprehensive-analysis.json"


def deps(count: int) -> list[str]:
    """Return ``count`` distinct dependency names."""
    return [f"./dep{index}" for index in range(count)]


__all__ = ["ReportBuilder", "deps"]
