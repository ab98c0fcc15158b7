"""Shared helpers for reading report files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import ReportMissingError, ReportParseError, ReportReadError


def read_report_text(path: Path, description: str) -> str:
    """Return the contents of ``path`` or raise a ``ReportError``.

    Bytes that are not valid UTF-8 decode to U+FFFD instead of failing the report.
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as exc:
        raise ReportMissingError(description, path, "file not found") from exc
    except OSError as exc:
        raise ReportReadError(description, path, exc.strerror or str(exc)) from exc


def read_report_json(path: Path, description: str) -> Any:
    text = read_report_text(path, description)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ReportParseError(description, path, f"invalid JSON: {exc}") from exc


def as_count(value: Any) -> int:
    """Coerce a report counter; anything non-numeric counts as zero."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0
