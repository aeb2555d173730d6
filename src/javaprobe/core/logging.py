from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging level based on CLI flags.

    Precedence:
    - quiet → ERROR
    - debug → DEBUG
    - verbose → INFO
    - default → WARNING
    """

    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger under the ``javaprobe`` namespace."""

    if name is None:
        return logging.getLogger("javaprobe")
    return logging.getLogger(name)
