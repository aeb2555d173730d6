from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


class CompatibilityVerdict(str, Enum):
    """Whether a Java installation can run on the current host."""

    UNKNOWN = "unknown"
    COMPATIBLE = "compatible"
    INCOMPATIBLE = "incompatible"
    UNDER_TRANSLATION = "under_translation"
    ERROR = "error"

    @property
    def is_usable(self) -> bool:
        """Anything but ERROR leaves the record usable by a launcher."""
        return self is not CompatibilityVerdict.ERROR


class HostOS(str, Enum):
    """Host operating system families with distinct compatibility rules."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    OTHER = "other"


class Architecture(str, Enum):
    """Instruction set architectures, for both hosts and executables."""

    X86 = "x86"
    X86_64 = "x86_64"
    ARM32 = "arm32"
    ARM64 = "arm64"
    RISCV64 = "riscv64"
    LOONGARCH64 = "loongarch64"
    OTHER = "other"


class BinaryFormat(str, Enum):
    """Executable container formats recognised by the header inspector."""

    ELF = "elf"
    MACHO = "macho"
    MACHO_FAT = "macho_fat"


@dataclass(frozen=True)
class ExecutableHeader:
    """Architecture information decoded from an executable header.

    Attributes:
        format: Container format detected from the magic bytes.
        architectures: Target architectures, one per slice. Thin binaries
            always carry exactly one.
        cpu_codes: Raw ELF machine / Mach-O CPU-type codes, in slice order.
    """

    format: BinaryFormat
    architectures: Tuple[Architecture, ...]
    cpu_codes: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if not self.architectures:
            raise ValueError("ExecutableHeader requires at least one architecture")
        if self.format is not BinaryFormat.MACHO_FAT and len(self.architectures) != 1:
            raise ValueError(f"{self.format.value} executables carry exactly one architecture")

    @property
    def is_fat(self) -> bool:
        return self.format is BinaryFormat.MACHO_FAT

    @property
    def architecture(self) -> Architecture:
        """The single target architecture of a thin executable."""
        return self.architectures[0]


@dataclass(frozen=True)
class RuntimeInfo:
    """Immutable snapshot of everything known about one Java installation.

    A record replaces its snapshot wholesale on refresh; fields are never
    updated in place.

    Attributes:
        major_version: Java feature release (8, 11, 17, ...). 0 when the
            version could not be determined, in which case the verdict is ERROR.
        is_64bit: Whether the runtime reports itself as a 64-Bit VM.
        is_jre: True when no ``javac`` sits beside ``java``.
        is_fat_binary: True when the executable is a multi-slice Mach-O.
        verdict: Compatibility with the host.
        java_exe: Primary executable.
        javaw_exe: GUI-mode executable (``javaw.exe`` on Windows, else ``java_exe``).
        architectures: Target architectures detected from the header, if inspected.
        error: Reason for an ERROR or UNKNOWN verdict, when one is known.
    """

    major_version: int
    is_64bit: bool
    is_jre: bool
    is_fat_binary: bool
    verdict: CompatibilityVerdict
    java_exe: Path
    javaw_exe: Path
    architectures: Tuple[Architecture, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.major_version < 0:
            raise ValueError(f"major_version must be non-negative, got {self.major_version}")
        if self.major_version == 0 and self.verdict is not CompatibilityVerdict.ERROR:
            raise ValueError("a runtime with an undetermined version must carry the ERROR verdict")

    @classmethod
    def failed(
        cls,
        java_exe: Path,
        javaw_exe: Path,
        error: str,
    ) -> "RuntimeInfo":
        """Snapshot for a runtime that could not be probed."""
        return cls(
            major_version=0,
            is_64bit=False,
            is_jre=False,
            is_fat_binary=False,
            verdict=CompatibilityVerdict.ERROR,
            java_exe=java_exe,
            javaw_exe=javaw_exe,
            error=error,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "major_version": self.major_version,
            "is_64bit": self.is_64bit,
            "is_jre": self.is_jre,
            "is_fat_binary": self.is_fat_binary,
            "verdict": self.verdict.value,
            "java_exe": str(self.java_exe),
            "javaw_exe": str(self.javaw_exe),
            "architectures": [arch.value for arch in self.architectures],
            "error": self.error,
        }
