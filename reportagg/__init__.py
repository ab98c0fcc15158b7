"""Consolidate lint, dependency and file-size reports into one analysis summary."""

__version__ = "0.1.0"
