"""Run the report loaders and write the consolidated analysis summary."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .config import AggregatorConfig
from .errors import ReportError
from .loaders import ReportLoader, discover_loaders
from .logging import get_logger
from .models import AggregationResult, AnalysisSummary, StepOutcome

# JSON escapes can decode to lone surrogates, which UTF-8 cannot encode.
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")

# Summary field filled by each loader.
_SUMMARY_FIELDS: Dict[str, str] = {
    "lint": "technical_debt",
    "dependencies": "refactoring_targets",
    "large_files": "large_files",
}


class ReportAggregator:
    """Builds an :class:`AnalysisSummary` from whichever reports are readable.

    Each loader runs in isolation: a missing or malformed report is logged and
    leaves its summary field empty, and the remaining loaders and the final
    write still run. Only a failure to write the output propagates.
    """

    def __init__(
        self,
        config: AggregatorConfig | None = None,
        loaders: Optional[Iterable[ReportLoader]] = None,
    ) -> None:
        self.config = config or AggregatorConfig.defaults()
        if loaders is not None:
            self.loaders = list(loaders)
        else:
            self.loaders = discover_loaders(self.config.enabled_loaders)
        self.logger = get_logger("aggregator")

    def collect(self) -> tuple[AnalysisSummary, List[StepOutcome]]:
        """Run every loader and assemble a fresh summary."""
        summary = AnalysisSummary()
        steps: List[StepOutcome] = []
        for loader in self.loaders:
            step = self._run_step(loader)
            steps.append(step)
            if step.ok:
                setattr(summary, _SUMMARY_FIELDS[loader.name], list(step.entries))
        return summary, steps

    def run(self, *, dry_run: bool = False) -> AggregationResult:
        """Collect the summary and write it to ``config.output_path``."""
        summary, steps = self.collect()
        if dry_run:
            self.logger.info("Dry-run completed; %s not written", self.config.output_path)
            return AggregationResult(summary=summary, steps=steps, output_path=None)

        output_path = self.write(summary)
        return AggregationResult(summary=summary, steps=steps, output_path=output_path)

    def write(self, summary: AnalysisSummary) -> Path:
        output_path = self.config.output_path
        payload = render_summary(summary).encode("utf-8")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(payload)
        self.logger.debug("Wrote analysis summary to %s", output_path)
        return output_path

    def _run_step(self, loader: ReportLoader) -> StepOutcome:
        path = loader.source(self.config)
        try:
            entries = loader.load(self.config)
        except ReportError as exc:
            self.logger.error("%s", exc)
            return StepOutcome(loader=loader.name, path=path, error=exc)
        self.logger.debug(
            "%s: kept %d entries from %s", loader.description, len(entries), path
        )
        return StepOutcome(loader=loader.name, path=path, entries=list(entries))


def render_summary(summary: AnalysisSummary) -> str:
    """Serialise ``summary`` as 2-space indented JSON without a trailing newline.

    Lone surrogates in report strings are written as U+FFFD.
    """
    text = json.dumps(summary.to_dict(), indent=2, ensure_ascii=False)
    return _LONE_SURROGATE.sub("\ufffd", text)


__all__ = ["ReportAggregator", "render_summary"]
