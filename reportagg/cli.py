"""CLI entrypoint for reportagg."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .aggregator import ReportAggregator, render_summary
from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reportagg",
        description=(
            "Combine ESLint, dependency graph and large-file reports into "
            "comprehensive-analysis.json."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write diagnostics to this file.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("."),
        help=f"Path to {CONFIG_FILENAME} or the directory holding it (defaults to current directory).",
    )
    parser.add_argument("--lint-report", type=Path, help="ESLint JSON report to read.")
    parser.add_argument("--dependency-graph", type=Path, help="Dependency graph JSON to read.")
    parser.add_argument("--large-files", type=Path, help="`<count> <path>` line list to read.")
    parser.add_argument("--output", type=Path, help="Where to write the consolidated summary.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the summary to stdout instead of writing the output file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for reportagg."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.lint_report is not None:
        config.lint_report_path = args.lint_report
    if args.dependency_graph is not None:
        config.dependency_graph_path = args.dependency_graph
    if args.large_files is not None:
        config.large_files_path = args.large_files
    if args.output is not None:
        config.output_path = args.output

    try:
        aggregator = ReportAggregator(config)
    except ValueError as exc:
        parser.exit(1, f"{exc}\n")

    try:
        result = aggregator.run(dry_run=bool(args.dry_run))
    except (OSError, UnicodeError) as exc:
        parser.exit(1, f"Failed to write {config.output_path}: {exc}\n")

    if result.output_path is None:
        print(render_summary(result.summary))
    else:
        print(f"Analysis report written to {_relativize(result.output_path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
