"""Status command implementation."""

from __future__ import annotations

import sys
from argparse import Namespace
from typing import IO, TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from javaprobe.config.models import JavaProbeConfig

from javaprobe.bootstrap.paths import JavaProbePaths
from javaprobe.bootstrap.platform import get_platform_info
from javaprobe.cli.commands import Command
from javaprobe.cli.exit_codes import EXIT_SUCCESS


class StatusCommand(Command):
    """Shows version, host platform and configuration sources."""

    def __init__(self, version: str, output: Optional[IO[str]] = None):
        """Initialize StatusCommand.

        Args:
            version: Current javaprobe version string.
            output: Stream to write to (default: stdout).
        """
        self._version = version
        self._output = output

    @property
    def name(self) -> str:
        """Command identifier."""
        return "status"

    def execute(self, args: Namespace, config: Optional["JavaProbeConfig"] = None) -> int:
        """Execute the status command.

        Returns:
            Exit code (always 0 for status).
        """
        out = self._output or sys.stdout
        paths = JavaProbePaths.default()
        platform_info = get_platform_info()

        print(f"javaprobe version: {self._version}", file=out)
        print(f"Platform: {platform_info.label}", file=out)
        print(f"Global config: {paths.global_config}", file=out)

        sources = config.sources if config else []
        if sources:
            print("Config sources:", file=out)
            for source in sources:
                print(f"  {source}", file=out)
        else:
            print("Config sources: defaults only", file=out)

        return EXIT_SUCCESS
