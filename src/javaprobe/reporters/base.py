"""Base class for runtime reporters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, Sequence

from javaprobe.pipeline.parallel import ProbeOutcome


class RuntimeReporter(ABC):
    """Base class for all runtime reporters.

    Each reporter writes the outcomes of one probe batch in a specific
    output format (JSON, table).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Reporter identifier (e.g., 'json', 'table')."""

    @abstractmethod
    def report(self, outcomes: Sequence[ProbeOutcome], output: IO[str]) -> None:
        """Format and write the probe outcomes.

        Args:
            outcomes: One outcome per probed directory, in input order.
            output: Output stream to write the formatted result.
        """
