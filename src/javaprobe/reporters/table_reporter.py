"""Table reporter for javaprobe."""

from __future__ import annotations

from typing import IO, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from javaprobe.core.models import CompatibilityVerdict
from javaprobe.pipeline.parallel import ProbeOutcome
from javaprobe.reporters.base import RuntimeReporter

# Fixed render width so output does not depend on the terminal
TABLE_WIDTH = 120

VERDICT_STYLES = {
    CompatibilityVerdict.COMPATIBLE: "green",
    CompatibilityVerdict.UNDER_TRANSLATION: "yellow",
    CompatibilityVerdict.INCOMPATIBLE: "red",
    CompatibilityVerdict.UNKNOWN: "dim",
    CompatibilityVerdict.ERROR: "bold red",
}


class TableReporter(RuntimeReporter):
    """Reporter that outputs probe outcomes as a human-readable table."""

    def __init__(self, width: int = TABLE_WIDTH) -> None:
        self._width = width

    @property
    def name(self) -> str:
        return "table"

    def report(self, outcomes: Sequence[ProbeOutcome], output: IO[str]) -> None:
        """Render probe outcomes as a table and write to output.

        Args:
            outcomes: Probe outcomes to format.
            output: Output stream to write to.
        """
        console = Console(file=output, width=self._width, highlight=False)

        if not outcomes:
            console.print("No directories probed.")
            return

        console.print(self._build_table(outcomes))

        found = sum(1 for outcome in outcomes if outcome.success)
        console.print(f"Found {found} of {len(outcomes)} runtimes.")

    def _build_table(self, outcomes: Sequence[ProbeOutcome]) -> Table:
        table = Table(title="Java runtimes", show_header=True)
        table.add_column("Directory", style="cyan", overflow="fold")
        table.add_column("Version", justify="right")
        table.add_column("Bits", justify="right")
        table.add_column("Kind")
        table.add_column("Architectures")
        table.add_column("Verdict")

        for outcome in outcomes:
            record = outcome.record
            if record is None:
                reason = outcome.error or "no usable runtime"
                table.add_row(
                    Text(str(outcome.directory)), "-", "-", "-", "-", Text(reason, style="dim")
                )
                continue

            info = record.info
            archs = ", ".join(arch.value for arch in info.architectures) or "-"
            if info.is_fat_binary:
                archs = f"{archs} (fat)"
            style = VERDICT_STYLES.get(info.verdict, "")
            table.add_row(
                Text(str(outcome.directory)),
                str(info.major_version),
                "64" if info.is_64bit else "32",
                "JRE" if info.is_jre else "JDK",
                archs,
                Text(info.verdict.value, style=style),
            )

        return table
