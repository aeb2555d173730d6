"""Reporters for javaprobe output formatting."""

from typing import Dict, List, Optional, Type

from javaprobe.reporters.base import RuntimeReporter
from javaprobe.reporters.json_reporter import JSONReporter
from javaprobe.reporters.table_reporter import TableReporter

REPORTERS: Dict[str, Type[RuntimeReporter]] = {
    "json": JSONReporter,
    "table": TableReporter,
}


def get_reporter(name: str) -> Optional[RuntimeReporter]:
    """Get an instantiated reporter by name."""
    reporter_class = REPORTERS.get(name.lower())
    return reporter_class() if reporter_class else None


def list_available_reporters() -> List[str]:
    """List names of all available reporters."""
    return sorted(REPORTERS)


__all__ = [
    "RuntimeReporter",
    "JSONReporter",
    "TableReporter",
    "get_reporter",
    "list_available_reporters",
]
