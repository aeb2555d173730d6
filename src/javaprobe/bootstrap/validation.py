"""Executable validation for javaprobe.

Checks that a Java executable is present and executable before it is spawned.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from javaprobe.core.logging import get_logger

LOGGER = get_logger(__name__)


class ExecutableStatus(str, Enum):
    """Status of an executable file."""

    PRESENT = "present"
    MISSING = "missing"
    NOT_A_FILE = "not_a_file"
    NOT_EXECUTABLE = "not_executable"


def validate_executable(path: Path) -> ExecutableStatus:
    """Validate a single executable.

    Args:
        path: Path to the executable.

    Returns:
        ExecutableStatus indicating whether the file can be spawned.
    """
    if not path.exists():
        return ExecutableStatus.MISSING

    if not path.is_file():
        return ExecutableStatus.NOT_A_FILE

    if not os.access(path, os.X_OK):
        return ExecutableStatus.NOT_EXECUTABLE

    return ExecutableStatus.PRESENT


def describe_status(status: ExecutableStatus) -> str:
    """Human-readable description of an ExecutableStatus."""
    if status == ExecutableStatus.PRESENT:
        return "present"
    elif status == ExecutableStatus.MISSING:
        return "not found"
    elif status == ExecutableStatus.NOT_A_FILE:
        return "not a regular file"
    else:
        return "not executable"
