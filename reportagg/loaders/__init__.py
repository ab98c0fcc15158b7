"""Report loader implementations and discovery utilities."""

from __future__ import annotations

from typing import Callable, List, Sequence, Set

from .base import ReportLoader
from .dependencies import DependencyGraphLoader
from .large_files import LargeFileListLoader
from .lint import LintReportLoader

_BUILTIN_FACTORIES: dict[str, Callable[[], ReportLoader]] = {
    "lint": LintReportLoader,
    "dependencies": DependencyGraphLoader,
    "large_files": LargeFileListLoader,
}


def discover_loaders(enabled: Sequence[str] | None = None) -> List[ReportLoader]:
    """Return instantiated loaders in run order, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}
        unknown = enabled_set.difference(_BUILTIN_FACTORIES)
        if unknown:
            missing = ", ".join(sorted(unknown))
            raise ValueError(f"Unknown loaders requested: {missing}")

    loaders: List[ReportLoader] = []
    for name, factory in _BUILTIN_FACTORIES.items():
        if enabled_set is not None and name not in enabled_set:
            continue
        loaders.append(factory())
    return loaders


__all__ = [
    "DependencyGraphLoader",
    "LargeFileListLoader",
    "LintReportLoader",
    "ReportLoader",
    "discover_loaders",
]
