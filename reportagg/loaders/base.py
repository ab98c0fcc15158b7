"""Base classes for report loaders."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from ..config import AggregatorConfig


class ReportLoader(ABC):
    """Contract for loaders that read one report and keep the notable entries.

    ``load`` raises a :class:`~reportagg.errors.ReportError` subclass when the
    report cannot be used; it never returns a partially filtered list.
    """

    name: str = ""
    description: str = ""

    @abstractmethod
    def source(self, config: AggregatorConfig) -> Path:
        """Return the report path this loader reads for ``config``."""

    @abstractmethod
    def load(self, config: AggregatorConfig) -> Sequence[object]:
        """Read the report and return the entries that pass the threshold."""

