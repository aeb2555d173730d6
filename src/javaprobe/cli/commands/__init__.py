"""CLI commands package.

This module provides the base Command class and exports all command implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from javaprobe.config.models import JavaProbeConfig


class Command(ABC):
    """Base class for CLI commands.

    All CLI commands should inherit from this class and implement
    the execute method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier."""

    @abstractmethod
    def execute(self, args: Namespace, config: Optional["JavaProbeConfig"] = None) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.
            config: Optional javaprobe configuration.

        Returns:
            Exit code (0 for success, non-zero for error).
        """


# Import command implementations for convenience
# ruff: noqa: E402
from javaprobe.cli.commands.inspect import InspectCommand
from javaprobe.cli.commands.status import StatusCommand

__all__ = [
    "Command",
    "InspectCommand",
    "StatusCommand",
]
