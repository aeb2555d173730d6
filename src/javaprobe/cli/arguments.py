"""Argument parser construction for javaprobe CLI.

This module builds the argument parser with subcommands:
- javaprobe status  - Show version, host platform and configuration sources
- javaprobe inspect - Probe Java installation directories
"""

from __future__ import annotations

import argparse
from pathlib import Path

from javaprobe.config.validation import VALID_HOST_ARCH, VALID_HOST_OS, VALID_OUTPUT_FORMATS


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show javaprobe version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _build_status_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'status' subcommand parser."""
    status_parser = subparsers.add_parser(
        "status",
        help="Show version, host platform and configuration.",
        description=(
            "Display javaprobe version, the detected host platform "
            "and where configuration was loaded from."
        ),
    )
    status_parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: .javaprobe.yml in current directory).",
    )


def _build_inspect_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'inspect' subcommand parser."""
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Probe Java installations and report compatibility.",
        description=(
            "Run 'java -version' in each directory, inspect the executable "
            "header and decide whether the runtime can run on this host."
        ),
    )

    target_group = inspect_parser.add_argument_group("targets")
    target_group.add_argument(
        "directories",
        nargs="+",
        metavar="DIR",
        help="Java bin directory holding the java executable.",
    )
    target_group.add_argument(
        "--user-imported",
        action="store_true",
        help="Mark the resulting records as imported by the user.",
    )

    output_group = inspect_parser.add_argument_group("output")
    output_group.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=None,
        help="Output format (default: table, or as specified in config file).",
    )

    config_group = inspect_parser.add_argument_group("configuration")
    config_group.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: .javaprobe.yml in current directory).",
    )
    config_group.add_argument(
        "--timeout",
        metavar="SECS",
        type=float,
        default=None,
        help="Seconds to wait for each 'java -version' (default: 10).",
    )
    config_group.add_argument(
        "--host-os",
        choices=sorted(VALID_HOST_OS),
        default=None,
        help="Evaluate as if running on this OS instead of the detected one.",
    )
    config_group.add_argument(
        "--host-arch",
        choices=sorted(VALID_HOST_ARCH),
        default=None,
        help="Evaluate as if running on this architecture instead of the detected one.",
    )

    exec_group = inspect_parser.add_argument_group("execution")
    exec_group.add_argument(
        "--sequential",
        action="store_true",
        help="Disable parallel probing (for debugging).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for javaprobe CLI.

    Returns:
        Configured ArgumentParser instance with subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="javaprobe",
        description="javaprobe - Java runtime compatibility probe.",
        epilog=(
            "Examples:\n"
            "  javaprobe status                               # Show host platform\n"
            "  javaprobe inspect /usr/lib/jvm/java-17/bin     # Probe one runtime\n"
            "  javaprobe inspect --format json DIR1 DIR2      # Probe several as JSON\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    _add_global_options(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands:",
        metavar="COMMAND",
    )

    _build_status_parser(subparsers)
    _build_inspect_parser(subparsers)

    return parser
