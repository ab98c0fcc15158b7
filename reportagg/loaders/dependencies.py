"""Dependency graph loader."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .base import ReportLoader
from .utils import read_report_json
from ..config import AggregatorConfig
from ..errors import ReportParseError
from ..models import DependencyEntry


class DependencyGraphLoader(ReportLoader):
    """Flags modules that import more than the configured number of modules."""

    name = "dependencies"
    description = "dependency graph"

    def source(self, config: AggregatorConfig) -> Path:
        return config.dependency_graph_path

    def load(self, config: AggregatorConfig) -> List[DependencyEntry]:
        path = self.source(config)
        graph = read_report_json(path, self.description)
        if not isinstance(graph, dict):
            raise ReportParseError(
                self.description, path, f"expected a JSON object, got {type(graph).__name__}"
            )

        targets: List[DependencyEntry] = []
        for module, dependencies in graph.items():
            if not isinstance(dependencies, list):
                raise ReportParseError(
                    self.description,
                    path,
                    f"dependencies of {module!r} must be an array",
                )
            count = len(dependencies)
            if count > config.dependency_count_threshold:
                targets.append(DependencyEntry(module_name=module, dependency_count=count))
        return targets
