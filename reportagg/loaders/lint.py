"""ESLint report loader."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .base import ReportLoader
from .utils import as_count, read_report_json
from ..config import AggregatorConfig
from ..errors import ReportParseError
from ..models import LintFinding


class LintReportLoader(ReportLoader):
    """Keeps files whose error or warning count exceeds the lint thresholds."""

    name = "lint"
    description = "ESLint report"

    def source(self, config: AggregatorConfig) -> Path:
        return config.lint_report_path

    def load(self, config: AggregatorConfig) -> List[LintFinding]:
        path = self.source(config)
        records = read_report_json(path, self.description)
        if not isinstance(records, list):
            raise ReportParseError(
                self.description, path, f"expected a JSON array, got {type(records).__name__}"
            )

        findings: List[LintFinding] = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise ReportParseError(
                    self.description, path, f"entry {index} is not an object"
                )
            errors = as_count(record.get("errorCount"))
            warnings = as_count(record.get("warningCount"))
            if errors > config.lint_error_threshold or warnings > config.lint_warning_threshold:
                file_path = record.get("filePath")
                findings.append(
                    LintFinding(
                        file_path=file_path if isinstance(file_path, str) else None,
                        error_count=errors,
                        warning_count=warnings,
                    )
                )
        return findings
