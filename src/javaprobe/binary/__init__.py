"""Executable header inspection (ELF, Mach-O thin, Mach-O fat)."""

from javaprobe.binary.inspector import (
    DEFAULT_HEADER_READ_LIMIT,
    detect_format,
    inspect_executable,
    inspect_header,
)

__all__ = [
    "DEFAULT_HEADER_READ_LIMIT",
    "detect_format",
    "inspect_executable",
    "inspect_header",
]
