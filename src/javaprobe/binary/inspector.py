"""Executable architecture inspection.

Detects the container format of an executable from its magic bytes and
decodes the target architecture(s). Detection order is fat Mach-O, thin
Mach-O, then ELF.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from javaprobe.binary import elf, macho
from javaprobe.core.errors import ParseError
from javaprobe.core.logging import get_logger
from javaprobe.core.models import BinaryFormat, ExecutableHeader

LOGGER = get_logger(__name__)

# Default number of leading bytes read from an executable. Comfortably
# covers ELF and thin Mach-O headers and any plausible fat table.
DEFAULT_HEADER_READ_LIMIT = 4096

# Smallest accepted read limit; enough for every fixed-size header consulted
MIN_HEADER_READ_LIMIT = 64


def detect_format(data: bytes) -> Optional[BinaryFormat]:
    """Detect the executable format from its magic bytes.

    Returns:
        The BinaryFormat, or None if the magic is not recognised.
    """
    if len(data) < 4:
        return None
    if macho.is_fat(data):
        return BinaryFormat.MACHO_FAT
    if macho.is_thin(data):
        return BinaryFormat.MACHO
    if elf.is_elf(data):
        return BinaryFormat.ELF
    return None


def inspect_header(data: bytes) -> ExecutableHeader:
    """Decode the architecture(s) of an executable from its leading bytes.

    Args:
        data: Leading bytes of the executable. For fat binaries these must
            cover the whole architecture table.

    Returns:
        ExecutableHeader with the detected format and architectures.

    Raises:
        ParseError: If the data is truncated or the format is unrecognised.
    """
    binary_format = detect_format(data)
    if binary_format is BinaryFormat.MACHO_FAT:
        return macho.parse_fat(data)
    if binary_format is BinaryFormat.MACHO:
        return macho.parse_thin(data)
    if binary_format is BinaryFormat.ELF:
        return elf.parse_elf(data)
    raise ParseError("unrecognized executable format")


def inspect_executable(
    path: Union[str, Path],
    read_limit: int = DEFAULT_HEADER_READ_LIMIT,
) -> ExecutableHeader:
    """Decode the architecture(s) of the executable at ``path``.

    Reads at most ``read_limit`` leading bytes. When a fat binary's
    architecture table extends past that prefix, exactly the missing part
    of the table is read from the open file; the rest of the file is never
    loaded.

    Raises:
        ParseError: If the file cannot be read, is truncated, or is not a
            recognised executable format.
    """
    if read_limit < MIN_HEADER_READ_LIMIT:
        raise ValueError(f"read_limit must be at least {MIN_HEADER_READ_LIMIT}, got {read_limit}")

    exe_path = Path(path)
    try:
        with open(exe_path, "rb") as f:
            data = f.read(read_limit)
            if detect_format(data) is BinaryFormat.MACHO_FAT:
                needed = macho.fat_table_size(data)
                if needed > len(data) == read_limit:
                    LOGGER.debug(f"{exe_path}: reading {needed - len(data)} more bytes of fat table")
                    data += f.read(needed - len(data))
    except OSError as e:
        raise ParseError(f"{exe_path}: cannot read header ({e})") from e

    header = inspect_header(data)
    LOGGER.debug(
        f"{exe_path}: {header.format.value} "
        f"[{', '.join(arch.value for arch in header.architectures)}]"
    )
    return header
