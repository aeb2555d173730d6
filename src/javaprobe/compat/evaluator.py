"""Host vs executable compatibility decisions.

Each host OS family has its own strategy; every strategy is a pure function
of the host architecture, the runtime's self-reported bitness and the
decoded executable header.

Known gaps, kept on purpose:
- Windows decides on bitness alone, so UNDER_TRANSLATION (Windows on ARM
  emulation) is never reported there.
- Linux compares architectures directly and does not detect user-mode
  emulation layers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional

from javaprobe.bootstrap.platform import PlatformInfo
from javaprobe.core.models import (
    Architecture,
    BinaryFormat,
    CompatibilityVerdict,
    ExecutableHeader,
    HostOS,
)


@dataclass(frozen=True)
class UnsupportedHostArchitecture:
    """A host OS / architecture pair the decision table does not cover."""

    host_os: HostOS
    host_arch: Architecture

    @property
    def message(self) -> str:
        return (
            f"unsupported host architecture {self.host_arch.value} "
            f"on {self.host_os.value}"
        )

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Evaluation:
    """Outcome of a compatibility evaluation.

    ``error`` is set only for host combinations outside the decision table;
    the verdict is then ERROR.
    """

    verdict: CompatibilityVerdict
    error: Optional[UnsupportedHostArchitecture] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CompatibilityStrategy(ABC):
    """Decision rules for one host OS family."""

    @property
    @abstractmethod
    def host_os(self) -> HostOS:
        """OS family these rules apply to."""

    @property
    def inspects_binary(self) -> bool:
        """Whether evaluate() consults the executable header."""
        return True

    @abstractmethod
    def evaluate(
        self,
        host_arch: Architecture,
        is_64bit: bool,
        header: Optional[ExecutableHeader],
    ) -> Evaluation:
        """Decide compatibility.

        Args:
            host_arch: Architecture of the host OS.
            is_64bit: Whether the runtime reports itself as 64-bit.
            header: Decoded executable header, or None when no architecture
                could be detected.
        """


class WindowsStrategy(CompatibilityStrategy):
    """A 64-bit runtime is compatible; the header is never read."""

    @property
    def host_os(self) -> HostOS:
        return HostOS.WINDOWS

    @property
    def inspects_binary(self) -> bool:
        return False

    def evaluate(
        self,
        host_arch: Architecture,
        is_64bit: bool,
        header: Optional[ExecutableHeader],
    ) -> Evaluation:
        if is_64bit:
            return Evaluation(CompatibilityVerdict.COMPATIBLE)
        return Evaluation(CompatibilityVerdict.INCOMPATIBLE)


class MacOSStrategy(CompatibilityStrategy):
    """Apple silicon runs x86_64 code through Rosetta 2; Intel Macs run only x86_64."""

    @property
    def host_os(self) -> HostOS:
        return HostOS.MACOS

    def evaluate(
        self,
        host_arch: Architecture,
        is_64bit: bool,
        header: Optional[ExecutableHeader],
    ) -> Evaluation:
        if host_arch not in (Architecture.ARM64, Architecture.X86_64):
            return Evaluation(
                CompatibilityVerdict.ERROR,
                UnsupportedHostArchitecture(HostOS.MACOS, host_arch),
            )
        if header is None:
            return Evaluation(CompatibilityVerdict.UNKNOWN)
        if header.format is BinaryFormat.ELF:
            return Evaluation(CompatibilityVerdict.INCOMPATIBLE)
        if header.is_fat:
            return self._evaluate_fat(host_arch, header)
        return self._evaluate_thin(host_arch, header.architecture)

    @staticmethod
    def _evaluate_thin(host_arch: Architecture, target: Architecture) -> Evaluation:
        if host_arch is Architecture.ARM64:
            if target is Architecture.ARM64:
                return Evaluation(CompatibilityVerdict.COMPATIBLE)
            if target is Architecture.X86_64:
                return Evaluation(CompatibilityVerdict.UNDER_TRANSLATION)
            return Evaluation(CompatibilityVerdict.INCOMPATIBLE)

        if target is Architecture.X86_64:
            return Evaluation(CompatibilityVerdict.COMPATIBLE)
        return Evaluation(CompatibilityVerdict.INCOMPATIBLE)

    @staticmethod
    def _evaluate_fat(host_arch: Architecture, header: ExecutableHeader) -> Evaluation:
        slices = set(header.architectures)
        if host_arch is Architecture.ARM64:
            if Architecture.ARM64 in slices:
                return Evaluation(CompatibilityVerdict.COMPATIBLE)
            if Architecture.X86_64 in slices:
                return Evaluation(CompatibilityVerdict.UNDER_TRANSLATION)
            return Evaluation(CompatibilityVerdict.ERROR)

        if Architecture.X86_64 in slices:
            return Evaluation(CompatibilityVerdict.COMPATIBLE)
        return Evaluation(CompatibilityVerdict.INCOMPATIBLE)


class LinuxStrategy(CompatibilityStrategy):
    """The ELF machine must match the host architecture exactly."""

    @property
    def host_os(self) -> HostOS:
        return HostOS.LINUX

    def evaluate(
        self,
        host_arch: Architecture,
        is_64bit: bool,
        header: Optional[ExecutableHeader],
    ) -> Evaluation:
        if header is None:
            return Evaluation(CompatibilityVerdict.UNKNOWN)
        if header.format is not BinaryFormat.ELF:
            return Evaluation(CompatibilityVerdict.INCOMPATIBLE)

        target = header.architecture
        if target is Architecture.OTHER:
            return Evaluation(CompatibilityVerdict.UNKNOWN)
        if target is host_arch:
            return Evaluation(CompatibilityVerdict.COMPATIBLE)
        return Evaluation(CompatibilityVerdict.INCOMPATIBLE)


class UnsupportedOSStrategy(CompatibilityStrategy):
    """No rules exist for this OS; the verdict stays UNKNOWN."""

    def __init__(self, host_os: HostOS = HostOS.OTHER) -> None:
        self._host_os = host_os

    @property
    def host_os(self) -> HostOS:
        return self._host_os

    @property
    def inspects_binary(self) -> bool:
        return False

    def evaluate(
        self,
        host_arch: Architecture,
        is_64bit: bool,
        header: Optional[ExecutableHeader],
    ) -> Evaluation:
        return Evaluation(CompatibilityVerdict.UNKNOWN)


STRATEGIES: Dict[HostOS, CompatibilityStrategy] = {
    HostOS.WINDOWS: WindowsStrategy(),
    HostOS.MACOS: MacOSStrategy(),
    HostOS.LINUX: LinuxStrategy(),
    HostOS.OTHER: UnsupportedOSStrategy(),
}


def get_strategy(host_os: HostOS) -> CompatibilityStrategy:
    """Return the strategy for ``host_os``."""
    return STRATEGIES.get(host_os, STRATEGIES[HostOS.OTHER])


def evaluate_compatibility(
    host: PlatformInfo,
    major_version: int,
    is_64bit: bool,
    header: Optional[ExecutableHeader],
) -> Evaluation:
    """Decide whether a runtime can run on ``host``.

    A runtime whose version could not be determined is never trusted,
    whatever its header says.
    """
    if major_version == 0:
        return Evaluation(CompatibilityVerdict.ERROR)
    return get_strategy(host.os).evaluate(host.arch, is_64bit, header)
