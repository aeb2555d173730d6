"""Tests for the Mach-O thin and fat header readers."""

from __future__ import annotations

import struct

import pytest

from javaprobe.binary.architectures import (
    CPU_TYPE_ARM64,
    CPU_TYPE_ARM64_32,
    CPU_TYPE_POWERPC,
    CPU_TYPE_X86,
    CPU_TYPE_X86_64,
)
from javaprobe.binary.macho import (
    FAT_HEADER_SIZE,
    MAX_FAT_ARCHES,
    fat_table_size,
    is_fat,
    is_thin,
    parse_fat,
    parse_thin,
    read_magic,
)
from javaprobe.core.errors import ParseError
from javaprobe.core.models import Architecture, BinaryFormat


class TestParseThin:
    """Tests for single-architecture Mach-O headers."""

    def test_little_endian_arm64(self, header_builders) -> None:
        header = parse_thin(header_builders.macho_thin(CPU_TYPE_ARM64))
        assert header.format == BinaryFormat.MACHO
        assert header.architecture == Architecture.ARM64
        assert header.cpu_codes == (CPU_TYPE_ARM64,)

    def test_big_endian_x86_64(self, header_builders) -> None:
        data = header_builders.macho_thin(CPU_TYPE_X86_64, little_endian=False)
        assert parse_thin(data).architecture == Architecture.X86_64

    def test_32bit_magic(self) -> None:
        data = struct.pack("<III", 0xFEEDFACE, CPU_TYPE_X86, 3)
        assert parse_thin(data).architecture == Architecture.X86

    @pytest.mark.parametrize("cpu_type", [CPU_TYPE_ARM64_32, CPU_TYPE_POWERPC])
    def test_unmapped_cpu_types(self, header_builders, cpu_type: int) -> None:
        assert parse_thin(header_builders.macho_thin(cpu_type)).architecture == Architecture.OTHER

    def test_truncated(self, header_builders) -> None:
        with pytest.raises(ParseError, match="truncated"):
            parse_thin(header_builders.macho_thin(CPU_TYPE_ARM64)[:6])

    def test_wrong_magic(self, elf_x86_64: bytes) -> None:
        with pytest.raises(ParseError, match="not a Mach-O"):
            parse_thin(elf_x86_64)


class TestParseFat:
    """Tests for universal binaries."""

    def test_two_slices(self, universal_binary: bytes) -> None:
        header = parse_fat(universal_binary)
        assert header.format == BinaryFormat.MACHO_FAT
        assert header.is_fat is True
        assert header.architectures == (Architecture.X86_64, Architecture.ARM64)
        assert header.cpu_codes == (CPU_TYPE_X86_64, CPU_TYPE_ARM64)

    def test_fat64_records(self, header_builders) -> None:
        data = header_builders.macho_fat([CPU_TYPE_ARM64, CPU_TYPE_X86_64], fat64=True)
        assert parse_fat(data).architectures == (Architecture.ARM64, Architecture.X86_64)

    def test_byte_swapped_magic(self) -> None:
        data = struct.pack("<II", 0xCAFEBABE, 1) + struct.pack("<IIIII", CPU_TYPE_ARM64, 0, 0, 0, 0)
        assert parse_fat(data).architectures == (Architecture.ARM64,)

    def test_truncated_table(self, universal_binary: bytes) -> None:
        with pytest.raises(ParseError, match="truncated"):
            parse_fat(universal_binary[:-1])

    def test_zero_slices(self) -> None:
        with pytest.raises(ParseError, match="implausible"):
            parse_fat(struct.pack(">II", 0xCAFEBABE, 0))

    def test_java_class_file_rejected(self) -> None:
        # minor_version 0, major_version 52 (Java 8)
        class_file = struct.pack(">IHH", 0xCAFEBABE, 0, 52) + b"\x00" * 64
        assert struct.unpack_from(">I", class_file, 4)[0] > MAX_FAT_ARCHES
        with pytest.raises(ParseError, match="implausible"):
            parse_fat(class_file)

    def test_fat_table_size(self, universal_binary: bytes, header_builders) -> None:
        assert fat_table_size(universal_binary) == len(universal_binary)
        fat64 = header_builders.macho_fat([CPU_TYPE_ARM64], fat64=True)
        assert fat_table_size(fat64[:FAT_HEADER_SIZE]) == FAT_HEADER_SIZE + 32


class TestMagic:
    """Tests for magic detection."""

    def test_read_magic_short(self) -> None:
        with pytest.raises(ParseError):
            read_magic(b"\xca\xfe")

    def test_classification(self, universal_binary: bytes, header_builders) -> None:
        thin = header_builders.macho_thin(CPU_TYPE_ARM64)
        assert is_fat(universal_binary) and not is_thin(universal_binary)
        assert is_thin(thin) and not is_fat(thin)
        assert not is_fat(b"") and not is_thin(b"")
