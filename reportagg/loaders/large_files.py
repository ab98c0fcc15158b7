"""Large file list loader (``wc -l`` style output)."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from .base import ReportLoader
from .utils import read_report_text
from ..config import AggregatorConfig
from ..models import LargeFileEntry

# Unanchored so indented `wc -l` output matches; the path stops before any \r.
_LINE_PATTERN = re.compile(r"(\d+)\s+([^\r\n]+)", re.ASCII)


class LargeFileListLoader(ReportLoader):
    """Parses ``<count> <path>`` lines and keeps files above the line threshold."""

    name = "large_files"
    description = "large file list"

    def source(self, config: AggregatorConfig) -> Path:
        return config.large_files_path

    def load(self, config: AggregatorConfig) -> List[LargeFileEntry]:
        text = read_report_text(self.source(config), self.description)
        entries: List[LargeFileEntry] = []
        for line in text.split("\n"):
            parsed = parse_line(line)
            if parsed is None:
                continue
            if parsed.line_count > config.large_file_line_threshold:
                entries.append(parsed)
        return entries


def parse_line(line: str) -> LargeFileEntry | None:
    """Return the entry described by ``line`` or ``None`` when it does not match."""
    match = _LINE_PATTERN.search(line)
    if not match:
        return None
    return LargeFileEntry(file_path=match.group(2), line_count=int(match.group(1)))
