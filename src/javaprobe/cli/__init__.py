"""Command-line interface for javaprobe."""

from __future__ import annotations

import sys
from typing import Iterable, Optional

from javaprobe.cli.runner import CLIRunner


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Returns an exit code suitable for use as a console script.
    """
    runner = CLIRunner()
    return runner.run(argv)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
