"""Mach-O thin and fat (universal) header readers.

Thin header (<mach-o/loader.h>)::

    0x00  magic       u32   MH_MAGIC / MH_MAGIC_64 in the file's byte order
    0x04  cputype     u32
    0x08  cpusubtype  u32

Fat header (<mach-o/fat.h>), big-endian on disk::

    0x00  magic       u32   FAT_MAGIC / FAT_MAGIC_64
    0x04  nfat_arch   u32
    0x08  fat_arch[nfat_arch]
          fat_arch    : cputype, cpusubtype, offset, size, align       (20 bytes)
          fat_arch_64 : cputype, cpusubtype, offset64, size64, align,
                        reserved                                       (32 bytes)
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Dict, Tuple

from javaprobe.binary.architectures import architecture_from_macho_cpu_type
from javaprobe.core.errors import ParseError
from javaprobe.core.models import BinaryFormat, ExecutableHeader

MH_MAGIC = 0xFEEDFACE
MH_CIGAM = 0xCEFAEDFE
MH_MAGIC_64 = 0xFEEDFACF
MH_CIGAM_64 = 0xCFFAEDFE

FAT_MAGIC = 0xCAFEBABE
FAT_CIGAM = 0xBEBAFECA
FAT_MAGIC_64 = 0xCAFEBABF
FAT_CIGAM_64 = 0xBFBAFECA

THIN_HEADER_MIN_SIZE = 12
FAT_HEADER_SIZE = 8
FAT_ARCH_SIZE = 20
FAT_ARCH_64_SIZE = 32

# Java class files share FAT_MAGIC; their "nfat_arch" is the class file
# version (45 and up), so a real universal binary never gets near this.
MAX_FAT_ARCHES = 30


@dataclass(frozen=True)
class _Layout:
    byte_order: str
    arch_size: int


# Magic (read big-endian) -> field byte order
_THIN_BYTE_ORDER: Dict[int, str] = {
    MH_MAGIC: ">",
    MH_MAGIC_64: ">",
    MH_CIGAM: "<",
    MH_CIGAM_64: "<",
}

_FAT_LAYOUTS: Dict[int, _Layout] = {
    FAT_MAGIC: _Layout(">", FAT_ARCH_SIZE),
    FAT_CIGAM: _Layout("<", FAT_ARCH_SIZE),
    FAT_MAGIC_64: _Layout(">", FAT_ARCH_64_SIZE),
    FAT_CIGAM_64: _Layout("<", FAT_ARCH_64_SIZE),
}


def read_magic(data: bytes) -> int:
    """Return the first four bytes as a big-endian integer.

    Raises:
        ParseError: If fewer than four bytes are available.
    """
    if len(data) < 4:
        raise ParseError(f"header truncated: {len(data)} bytes, need 4")
    (magic,) = struct.unpack_from(">I", data, 0)
    return magic


def is_thin(data: bytes) -> bool:
    return len(data) >= 4 and read_magic(data) in _THIN_BYTE_ORDER


def is_fat(data: bytes) -> bool:
    return len(data) >= 4 and read_magic(data) in _FAT_LAYOUTS


def parse_thin(data: bytes) -> ExecutableHeader:
    """Decode the cputype of a single-architecture Mach-O image."""
    magic = read_magic(data)
    byte_order = _THIN_BYTE_ORDER.get(magic)
    if byte_order is None:
        raise ParseError(f"not a Mach-O header (magic 0x{magic:08x})")
    if len(data) < THIN_HEADER_MIN_SIZE:
        raise ParseError(
            f"Mach-O header truncated: {len(data)} bytes, need {THIN_HEADER_MIN_SIZE}"
        )

    (cpu_type,) = struct.unpack_from(f"{byte_order}I", data, 4)
    return ExecutableHeader(
        format=BinaryFormat.MACHO,
        architectures=(architecture_from_macho_cpu_type(cpu_type),),
        cpu_codes=(cpu_type,),
    )


def _fat_layout(data: bytes) -> Tuple[_Layout, int]:
    magic = read_magic(data)
    layout = _FAT_LAYOUTS.get(magic)
    if layout is None:
        raise ParseError(f"not a fat Mach-O header (magic 0x{magic:08x})")
    if len(data) < FAT_HEADER_SIZE:
        raise ParseError(
            f"fat header truncated: {len(data)} bytes, need {FAT_HEADER_SIZE}"
        )

    (count,) = struct.unpack_from(f"{layout.byte_order}I", data, 4)
    if count == 0 or count > MAX_FAT_ARCHES:
        raise ParseError(f"implausible fat architecture count {count}")
    return layout, count


def fat_table_size(data: bytes) -> int:
    """Number of leading bytes needed to parse the whole fat header.

    Only the first eight bytes of ``data`` are consulted.
    """
    layout, count = _fat_layout(data)
    return FAT_HEADER_SIZE + count * layout.arch_size


def parse_fat(data: bytes) -> ExecutableHeader:
    """Decode the cputype of every slice of a universal binary."""
    layout, count = _fat_layout(data)
    needed = FAT_HEADER_SIZE + count * layout.arch_size
    if len(data) < needed:
        raise ParseError(
            f"fat architecture table truncated: {len(data)} bytes, need {needed}"
        )

    cpu_types = tuple(
        struct.unpack_from(f"{layout.byte_order}I", data, FAT_HEADER_SIZE + index * layout.arch_size)[0]
        for index in range(count)
    )
    return ExecutableHeader(
        format=BinaryFormat.MACHO_FAT,
        architectures=tuple(architecture_from_macho_cpu_type(cpu) for cpu in cpu_types),
        cpu_codes=cpu_types,
    )
