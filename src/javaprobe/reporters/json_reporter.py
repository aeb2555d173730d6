"""JSON reporter for javaprobe."""

from __future__ import annotations

import json
from typing import IO, Any, Dict, Sequence

from javaprobe.pipeline.parallel import ProbeOutcome
from javaprobe.reporters.base import RuntimeReporter

# Bumped whenever the layout of the JSON document changes
SCHEMA_VERSION = "1.0"


class JSONReporter(RuntimeReporter):
    """Reporter that outputs probe outcomes as JSON.

    Produces machine-readable JSON containing:
    - Schema version
    - One entry per probed directory, with its runtime snapshot or null
    - Summary counts
    """

    @property
    def name(self) -> str:
        return "json"

    def report(self, outcomes: Sequence[ProbeOutcome], output: IO[str]) -> None:
        """Format probe outcomes as JSON and write to output.

        Args:
            outcomes: Probe outcomes to format.
            output: Output stream to write to.
        """
        formatted = self._format_outcomes(outcomes)
        json.dump(formatted, output, indent=2)
        output.write("\n")

    def _format_outcomes(self, outcomes: Sequence[ProbeOutcome]) -> Dict[str, Any]:
        found = sum(1 for outcome in outcomes if outcome.success)
        return {
            "schema_version": SCHEMA_VERSION,
            "runtimes": [self._outcome_to_dict(outcome) for outcome in outcomes],
            "summary": {
                "total": len(outcomes),
                "found": found,
                "missing": len(outcomes) - found,
            },
        }

    def _outcome_to_dict(self, outcome: ProbeOutcome) -> Dict[str, Any]:
        record = outcome.record
        return {
            "directory": str(outcome.directory),
            "user_imported": record.user_imported if record else None,
            "info": record.info.to_dict() if record else None,
            "error": outcome.error,
        }
