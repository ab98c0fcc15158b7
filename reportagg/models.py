"""Core data models shared across reportagg components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .errors import ReportError


@dataclass
class LintFinding:
    """A lint report entry with enough errors or warnings to count as debt."""

    file_path: Optional[str]
    error_count: int
    warning_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file_path,
            "errorCount": self.error_count,
            "warningCount": self.warning_count,
        }


@dataclass
class DependencyEntry:
    """A module whose dependency fan-out marks it as a refactoring target."""

    module_name: str
    dependency_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"module": self.module_name, "dependencyCount": self.dependency_count}


@dataclass
class LargeFileEntry:
    """A source file whose line count exceeds the large-file threshold."""

    file_path: str
    line_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"file": self.file_path, "lineCount": self.line_count}


@dataclass
class AnalysisSummary:
    """Consolidated view written to the analysis output file.

    ``complexity_issues`` has no source report and is always emitted empty.
    """

    technical_debt: List[LintFinding] = field(default_factory=list)
    refactoring_targets: List[DependencyEntry] = field(default_factory=list)
    complexity_issues: List[Dict[str, Any]] = field(default_factory=list)
    large_files: List[LargeFileEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "technicalDebt": [entry.to_dict() for entry in self.technical_debt],
            "refactoringTargets": [entry.to_dict() for entry in self.refactoring_targets],
            "complexityIssues": list(self.complexity_issues),
            "largeFiles": [entry.to_dict() for entry in self.large_files],
        }


@dataclass
class StepOutcome:
    """Result of one load step: the retained entries or the error that stopped it."""

    loader: str
    path: Path
    entries: Sequence[Any] = field(default_factory=list)
    error: Optional[ReportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class AggregationResult:
    """Everything a run produced, for callers that need more than the file."""

    summary: AnalysisSummary
    steps: List[StepOutcome]
    output_path: Optional[Path]

    @property
    def failures(self) -> List[StepOutcome]:
        return [step for step in self.steps if not step.ok]
