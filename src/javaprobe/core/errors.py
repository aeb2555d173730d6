"""Exception taxonomy for javaprobe.

``ProbeError`` marks a runtime that could not report its version and is
therefore never trusted. ``ParseError`` marks an executable header that could
not be decoded; callers treat it as "no architecture detected" rather than as
a hard failure.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class JavaProbeError(Exception):
    """Base class for all javaprobe errors."""


class ProbeError(JavaProbeError):
    """The Java executable could not be spawned or produced no banner."""

    def __init__(self, message: str, executable: Optional[Path] = None):
        super().__init__(message)
        self.executable = executable


class ParseError(JavaProbeError):
    """An executable header is truncated, implausible, or of unknown format."""
