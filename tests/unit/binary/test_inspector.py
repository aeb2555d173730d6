"""Tests for executable architecture inspection."""

from __future__ import annotations

from pathlib import Path

import pytest

from javaprobe.binary.architectures import CPU_TYPE_ARM64, CPU_TYPE_X86_64
from javaprobe.binary.inspector import (
    DEFAULT_HEADER_READ_LIMIT,
    MIN_HEADER_READ_LIMIT,
    detect_format,
    inspect_executable,
    inspect_header,
)
from javaprobe.core.errors import ParseError
from javaprobe.core.models import Architecture, BinaryFormat


class TestDetectFormat:
    """Tests for magic-based format detection."""

    def test_formats(self, elf_x86_64: bytes, universal_binary: bytes, header_builders) -> None:
        assert detect_format(elf_x86_64) == BinaryFormat.ELF
        assert detect_format(universal_binary) == BinaryFormat.MACHO_FAT
        assert detect_format(header_builders.macho_thin(CPU_TYPE_ARM64)) == BinaryFormat.MACHO

    @pytest.mark.parametrize("data", [b"", b"\x7fE", b"#!/bin/sh\n", b"MZ\x90\x00"])
    def test_unrecognised(self, data: bytes) -> None:
        assert detect_format(data) is None


class TestInspectHeader:
    """Tests for inspect_header."""

    def test_elf(self, elf_arm64: bytes) -> None:
        assert inspect_header(elf_arm64).architecture == Architecture.ARM64

    def test_unknown_magic(self) -> None:
        with pytest.raises(ParseError, match="unrecognized"):
            inspect_header(b"#!/bin/sh\nexec java\n")

    def test_too_short(self) -> None:
        with pytest.raises(ParseError):
            inspect_header(b"\x7f")


class TestInspectExecutable:
    """Tests for reading headers from files."""

    def test_reads_elf_file(self, tmp_path: Path, elf_x86_64: bytes) -> None:
        java = tmp_path / "java"
        java.write_bytes(elf_x86_64 + b"\x00" * 10_000)
        header = inspect_executable(java)
        assert header.format == BinaryFormat.ELF
        assert header.architecture == Architecture.X86_64

    def test_reads_universal_file(self, tmp_path: Path, universal_binary: bytes) -> None:
        java = tmp_path / "java"
        java.write_bytes(universal_binary + b"\x00" * 100)
        assert inspect_executable(java).architectures == (
            Architecture.X86_64,
            Architecture.ARM64,
        )

    def test_fat_table_beyond_read_limit(self, tmp_path: Path, header_builders) -> None:
        cpu_types = [CPU_TYPE_X86_64] * 5 + [CPU_TYPE_ARM64]
        data = header_builders.macho_fat(cpu_types)
        assert len(data) > MIN_HEADER_READ_LIMIT
        java = tmp_path / "java"
        java.write_bytes(data)

        header = inspect_executable(java, read_limit=MIN_HEADER_READ_LIMIT)
        assert header.architectures[-1] == Architecture.ARM64
        assert len(header.architectures) == 6

    def test_truncated_file(self, tmp_path: Path, universal_binary: bytes) -> None:
        java = tmp_path / "java"
        java.write_bytes(universal_binary[:12])
        with pytest.raises(ParseError, match="truncated"):
            inspect_executable(java)

    def test_script_is_unrecognised(self, tmp_path: Path) -> None:
        java = tmp_path / "java"
        java.write_text("#!/bin/sh\nexec /usr/bin/java \"$@\"\n")
        with pytest.raises(ParseError):
            inspect_executable(java)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ParseError, match="cannot read"):
            inspect_executable(tmp_path / "java")

    def test_read_limit_floor(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            inspect_executable(tmp_path / "java", read_limit=MIN_HEADER_READ_LIMIT - 1)

    def test_default_limit(self) -> None:
        assert DEFAULT_HEADER_READ_LIMIT == 4096
