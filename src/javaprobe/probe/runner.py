"""Spawning a Java runtime to capture its version banner."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Union

from javaprobe.bootstrap.validation import (
    ExecutableStatus,
    describe_status,
    validate_executable,
)
from javaprobe.core.errors import ProbeError
from javaprobe.core.logging import get_logger

LOGGER = get_logger(__name__)

# Argument asking a Java runtime to print its version banner
VERSION_ARGUMENT = "-version"

# Default timeout in seconds for a runtime to print its banner and exit
DEFAULT_PROBE_TIMEOUT = 10.0

_CREATION_FLAGS = getattr(subprocess, "CREATE_NO_WINDOW", 0) if sys.platform == "win32" else 0


def run_version_query(
    executable: Union[str, Path],
    timeout: float = DEFAULT_PROBE_TIMEOUT,
) -> str:
    """Run ``<executable> -version`` and return its banner.

    Both output streams are captured independently. Most runtimes print the
    banner to stderr, so stderr wins whenever it holds any text.

    Args:
        executable: Path to the java executable.
        timeout: Seconds to wait for the process to exit.

    Returns:
        The banner text.

    Raises:
        ProbeError: If the executable is missing or not executable, cannot be
            spawned, does not exit within the timeout, or prints nothing.
    """
    exe_path = Path(executable)

    status = validate_executable(exe_path)
    if status != ExecutableStatus.PRESENT:
        raise ProbeError(f"{exe_path}: {describe_status(status)}", exe_path)

    cmd = [str(exe_path), VERSION_ARGUMENT]
    LOGGER.debug(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            creationflags=_CREATION_FLAGS,
        )
    except subprocess.TimeoutExpired as e:
        raise ProbeError(f"{exe_path}: timed out after {timeout}s", exe_path) from e
    except OSError as e:
        raise ProbeError(f"{exe_path}: failed to start ({e})", exe_path) from e

    stderr = result.stderr or ""
    stdout = result.stdout or ""
    output = stderr if stderr.strip() else stdout

    if not output.strip():
        raise ProbeError(
            f"{exe_path}: no output (exit code {result.returncode})",
            exe_path,
        )

    if result.returncode != 0:
        LOGGER.debug(f"{exe_path} exited with code {result.returncode}; using its output anyway")

    return output


class RuntimeProbe:
    """Captures version banners from Java executables.

    Stateless apart from its timeout, so one instance may probe many
    executables from several threads.
    """

    def __init__(self, timeout: float = DEFAULT_PROBE_TIMEOUT) -> None:
        """Initialize RuntimeProbe.

        Args:
            timeout: Seconds to wait for each runtime to exit.
        """
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    def probe(self, executable: Union[str, Path]) -> str:
        """Return the version banner of ``executable``.

        Raises:
            ProbeError: See run_version_query.
        """
        return run_version_query(executable, timeout=self._timeout)
