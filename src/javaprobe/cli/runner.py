"""CLI runner orchestration.

This module handles command dispatch and execution for the javaprobe CLI.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Iterable, Optional

from javaprobe.cli.arguments import build_parser
from javaprobe.cli.commands.inspect import InspectCommand
from javaprobe.cli.commands.status import StatusCommand
from javaprobe.cli.config_bridge import ConfigBridge
from javaprobe.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from javaprobe.config import load_config
from javaprobe.config.loader import ConfigError
from javaprobe.config.models import JavaProbeConfig
from javaprobe.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get javaprobe version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("javaprobe")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from javaprobe import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        """Initialize CLIRunner with parser and commands."""
        self.parser = build_parser()
        self._version = get_version()
        self.status_cmd = StatusCommand(version=self._version)
        self.inspect_cmd = InspectCommand()

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None

        try:
            args = self.parser.parse_args(argv_list)
        except SystemExit as e:
            # argparse exits 0 for --help and 2 for usage errors
            return EXIT_SUCCESS if e.code in (0, None) else EXIT_INVALID_USAGE

        # Configure logging as early as possible
        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command = getattr(args, "command", None)

        if command == "inspect":
            return self._handle_inspect(args)
        elif command == "status":
            return self._handle_status(args)
        else:
            # No command specified - show help
            self.parser.print_help()
            return EXIT_SUCCESS

    def _load_config(self, args) -> Optional[JavaProbeConfig]:
        """Load configuration for a command, logging any error."""
        try:
            return load_config(
                project_root=Path.cwd(),
                cli_config_path=getattr(args, "config", None),
                cli_overrides=ConfigBridge.args_to_overrides(args),
            )
        except ConfigError as e:
            LOGGER.error(str(e))
            return None

    def _handle_inspect(self, args) -> int:
        """Handle the inspect command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code.
        """
        config = self._load_config(args)
        if config is None:
            return EXIT_INVALID_USAGE
        return self.inspect_cmd.execute(args, config)

    def _handle_status(self, args) -> int:
        """Handle the status command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code.
        """
        config = self._load_config(args)
        if config is None:
            return EXIT_INVALID_USAGE
        return self.status_cmd.execute(args, config)
