"""Inspect command implementation."""

from __future__ import annotations

import sys
from argparse import Namespace
from typing import IO, TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from javaprobe.config.models import JavaProbeConfig

from javaprobe.bootstrap.platform import resolve_platform
from javaprobe.cli.commands import Command
from javaprobe.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_RUNTIME_MISSING, EXIT_SUCCESS
from javaprobe.config.models import JavaProbeConfig
from javaprobe.core.logging import get_logger
from javaprobe.pipeline.parallel import ParallelRuntimeProber
from javaprobe.reporters import get_reporter

LOGGER = get_logger(__name__)


class InspectCommand(Command):
    """Probes Java installation directories and reports the results."""

    def __init__(self, output: Optional[IO[str]] = None):
        """Initialize InspectCommand.

        Args:
            output: Stream to write the report to (default: stdout).
        """
        self._output = output

    @property
    def name(self) -> str:
        """Command identifier."""
        return "inspect"

    def execute(self, args: Namespace, config: Optional["JavaProbeConfig"] = None) -> int:
        """Execute the inspect command.

        Returns:
            EXIT_SUCCESS if every directory yielded a record,
            EXIT_RUNTIME_MISSING if any did not.
        """
        config = config or JavaProbeConfig()

        reporter = get_reporter(config.output.format)
        if reporter is None:
            LOGGER.error(f"Unknown output format: {config.output.format}")
            return EXIT_INVALID_USAGE

        host = resolve_platform(config.host.os, config.host.arch)
        LOGGER.info(f"Evaluating against host {host.label}")

        prober = ParallelRuntimeProber(
            max_workers=config.scan.max_workers,
            sequential=getattr(args, "sequential", False),
        )
        outcomes = prober.probe_all(
            args.directories,
            user_imported=getattr(args, "user_imported", False),
            host=host,
            config=config.probe,
        )

        reporter.report(outcomes, self._output or sys.stdout)

        if all(outcome.success for outcome in outcomes):
            return EXIT_SUCCESS
        return EXIT_RUNTIME_MISSING
