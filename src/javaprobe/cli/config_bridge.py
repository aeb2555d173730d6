"""Bridge between CLI arguments and configuration models."""

from __future__ import annotations

import argparse
from typing import Any, Dict


class ConfigBridge:
    """Translates CLI arguments to configuration overrides."""

    @staticmethod
    def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
        """Convert CLI arguments to config override dict.

        Only options given explicitly on the command line are included, so
        config file values survive when a flag is omitted.

        Args:
            args: Parsed CLI arguments.

        Returns:
            Dictionary of config overrides.
        """
        overrides: Dict[str, Any] = {}

        timeout = getattr(args, "timeout", None)
        if timeout is not None:
            overrides["probe"] = {"timeout": timeout}

        output_format = getattr(args, "format", None)
        if output_format:
            overrides["output"] = {"format": output_format}

        host: Dict[str, Any] = {}
        host_os = getattr(args, "host_os", None)
        host_arch = getattr(args, "host_arch", None)
        if host_os:
            host["os"] = host_os
        if host_arch:
            host["arch"] = host_arch
        if host:
            overrides["host"] = host

        return overrides
