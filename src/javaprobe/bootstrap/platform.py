"""Host platform detection for javaprobe.

Detects the operating system and the CPU architecture of the machine that
will run the Java installations being probed.
"""

from __future__ import annotations

import platform
import subprocess
from dataclasses import dataclass
from typing import Optional

from javaprobe.core.logging import get_logger
from javaprobe.core.models import Architecture, HostOS

LOGGER = get_logger(__name__)

# OS normalization map (keys are platform.system().lower())
_OS_MAP = {
    "windows": HostOS.WINDOWS,
    "darwin": HostOS.MACOS,
    "macos": HostOS.MACOS,
    "linux": HostOS.LINUX,
}

# Architecture normalization map (keys are platform.machine().lower())
_ARCH_MAP = {
    "x86_64": Architecture.X86_64,
    "amd64": Architecture.X86_64,
    "x64": Architecture.X86_64,
    "i386": Architecture.X86,
    "i486": Architecture.X86,
    "i586": Architecture.X86,
    "i686": Architecture.X86,
    "x86": Architecture.X86,
    "arm64": Architecture.ARM64,
    "aarch64": Architecture.ARM64,
    "armv6l": Architecture.ARM32,
    "armv7l": Architecture.ARM32,
    "armv8l": Architecture.ARM32,
    "arm": Architecture.ARM32,
    "arm32": Architecture.ARM32,
    "riscv64": Architecture.RISCV64,
    "loongarch64": Architecture.LOONGARCH64,
}

# sysctl key reporting whether the current process runs under Rosetta 2
_ROSETTA_SYSCTL = "sysctl.proc_translated"


def normalize_os(system: str) -> HostOS:
    """Normalize an OS name to a HostOS member.

    Args:
        system: Raw OS name, e.g. from platform.system().

    Returns:
        The matching HostOS, or HostOS.OTHER for anything unrecognised.
    """
    return _OS_MAP.get(system.strip().lower(), HostOS.OTHER)


def normalize_arch(machine: str) -> Architecture:
    """Normalize an architecture string to an Architecture member.

    Args:
        machine: Raw architecture string, e.g. from platform.machine().

    Returns:
        The matching Architecture, or Architecture.OTHER if unknown.
    """
    return _ARCH_MAP.get(machine.strip().lower(), Architecture.OTHER)


def detect_os() -> HostOS:
    """Detect the current operating system."""
    return normalize_os(platform.system())


def _is_rosetta_translated() -> bool:
    """Check whether this process is an x86_64 process translated by Rosetta 2."""
    try:
        result = subprocess.run(
            ["sysctl", "-in", _ROSETTA_SYSCTL],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError) as e:
        LOGGER.debug(f"Could not query {_ROSETTA_SYSCTL}: {e}")
        return False
    return result.stdout.strip() == "1"


def detect_arch(host_os: Optional[HostOS] = None) -> Architecture:
    """Detect the CPU architecture of the operating system.

    platform.machine() reports the architecture of the running interpreter.
    On macOS an x86_64 interpreter may itself be running under Rosetta 2, in
    which case the machine is really arm64.

    Args:
        host_os: Already-detected host OS, to avoid detecting it twice.

    Returns:
        Normalized Architecture (Architecture.OTHER if unrecognised).
    """
    arch = normalize_arch(platform.machine())
    if host_os is None:
        host_os = detect_os()
    if host_os is HostOS.MACOS and arch is Architecture.X86_64 and _is_rosetta_translated():
        LOGGER.debug("Interpreter runs under Rosetta 2; host architecture is arm64")
        return Architecture.ARM64
    return arch


@dataclass(frozen=True)
class PlatformInfo:
    """Information about the host platform.

    Attributes:
        os: Operating system family.
        arch: CPU architecture.
    """

    os: HostOS
    arch: Architecture

    @property
    def label(self) -> str:
        """Return a short platform label, e.g. "macos-arm64"."""
        return f"{self.os.value}-{self.arch.value}"

    @property
    def is_windows(self) -> bool:
        return self.os is HostOS.WINDOWS


def get_platform_info() -> PlatformInfo:
    """Detect and return current platform information."""
    host_os = detect_os()
    return PlatformInfo(os=host_os, arch=detect_arch(host_os))


def resolve_platform(
    os_override: Optional[str] = None,
    arch_override: Optional[str] = None,
) -> PlatformInfo:
    """Return the host platform with optional per-field overrides.

    Overrides let a caller evaluate compatibility for a different host than
    the one it runs on; fields that are not overridden are detected.

    Args:
        os_override: OS name to use instead of the detected one.
        arch_override: Architecture name to use instead of the detected one.

    Returns:
        PlatformInfo combining overrides and detected values.
    """
    host_os = normalize_os(os_override) if os_override else detect_os()
    if arch_override:
        arch = normalize_arch(arch_override)
    else:
        arch = detect_arch(host_os)
    return PlatformInfo(os=host_os, arch=arch)
