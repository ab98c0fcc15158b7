"""Exceptions raised while reading analysis reports."""

from __future__ import annotations

from pathlib import Path


class ReportError(RuntimeError):
    """Base class for failures confined to a single report."""

    def __init__(self, description: str, path: Path, detail: str) -> None:
        self.description = description
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to read {description} ({path}): {detail}")


class ReportMissingError(ReportError):
    """The report file does not exist."""


class ReportParseError(ReportError):
    """The report is not valid JSON or has an unexpected shape."""


class ReportReadError(ReportError):
    """The report exists but could not be read or decoded."""


__all__ = [
    "ReportError",
    "ReportMissingError",
    "ReportParseError",
    "ReportReadError",
]
