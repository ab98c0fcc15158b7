"""Configuration loading for reportagg (.reportagg.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".reportagg.yml"

DEFAULT_LINT_REPORT = "eslint-report.json"
DEFAULT_DEPENDENCY_GRAPH = "dependency-graph.json"
DEFAULT_LARGE_FILES = "large-files.txt"
DEFAULT_OUTPUT = "comprehensive-analysis.json"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class AggregatorConfig:
    """Input/output locations and inclusion thresholds for one aggregation run."""

    root: Path
    lint_report_path: Path
    dependency_graph_path: Path
    large_files_path: Path
    output_path: Path
    lint_error_threshold: int = 5
    lint_warning_threshold: int = 10
    dependency_count_threshold: int = 10
    large_file_line_threshold: int = 300
    enabled_loaders: Optional[List[str]] = None

    @classmethod
    def defaults(cls, root: Path | None = None) -> "AggregatorConfig":
        """Return the stock configuration, with report files under ``root``."""
        base = (root or Path.cwd()).resolve()
        return cls(
            root=base,
            lint_report_path=base / DEFAULT_LINT_REPORT,
            dependency_graph_path=base / DEFAULT_DEPENDENCY_GRAPH,
            large_files_path=base / DEFAULT_LARGE_FILES,
            output_path=base / DEFAULT_OUTPUT,
        )


def load_config(config_path: Path) -> AggregatorConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent
    config = AggregatorConfig.defaults(root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    reports = _as_dict(data.get("reports"))
    if reports:
        config.lint_report_path = _resolve_path(root, reports.get("lint"), config.lint_report_path)
        config.dependency_graph_path = _resolve_path(
            root, reports.get("dependencies"), config.dependency_graph_path
        )
        config.large_files_path = _resolve_path(
            root, reports.get("large_files"), config.large_files_path
        )
    config.output_path = _resolve_path(root, data.get("output"), config.output_path)

    thresholds = _as_dict(data.get("thresholds"))
    if thresholds:
        config.lint_error_threshold = _threshold(
            thresholds, "lint_errors", config.lint_error_threshold
        )
        config.lint_warning_threshold = _threshold(
            thresholds, "lint_warnings", config.lint_warning_threshold
        )
        config.dependency_count_threshold = _threshold(
            thresholds, "dependencies", config.dependency_count_threshold
        )
        config.large_file_line_threshold = _threshold(
            thresholds, "large_file_lines", config.large_file_line_threshold
        )

    loaders = _as_dict(data.get("loaders"))
    if loaders and "enabled" in loaders:
        config.enabled_loaders = _as_str_list(loaders.get("enabled"))

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _resolve_path(root: Path, value: Any, default: Path) -> Path:
    raw = _as_str(value)
    if not raw:
        return default
    candidate = Path(raw).expanduser()
    if candidate.is_absolute():
        return candidate
    return root / candidate


def _threshold(section: Dict[str, Any], key: str, default: int) -> int:
    if key not in section or section[key] is None:
        return default
    value = _as_int(section[key])
    if value is None or value < 0:
        raise ConfigError(f"thresholds.{key} must be a non-negative integer, got {section[key]!r}")
    return value


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "AggregatorConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "load_config",
]
