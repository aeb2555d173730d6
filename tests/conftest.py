"""Shared fixtures: executable header builders and fake Java installations."""

from __future__ import annotations

import stat
import struct
from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest

from javaprobe.binary.architectures import (
    CPU_TYPE_ARM64,
    CPU_TYPE_X86_64,
    EM_AARCH64,
    EM_X86_64,
)

JDK17_BANNER = (
    'openjdk version "17.0.2" 2022-01-18\n'
    "OpenJDK Runtime Environment (build 17.0.2+8-86)\n"
    "OpenJDK 64-Bit Server VM (build 17.0.2+8-86, mixed mode, sharing)\n"
)

JDK8_32BIT_BANNER = (
    'java version "1.8.0_301"\n'
    "Java(TM) SE Runtime Environment (build 1.8.0_301-b09)\n"
    "Java HotSpot(TM) Client VM (build 25.301-b09, mixed mode)\n"
)

def build_elf(machine: int, little_endian: bool = True) -> bytes:
    """Minimal 64-bit ELF header prefix with the given e_machine."""
    order = "<" if little_endian else ">"
    ident = b"\x7fELF" + bytes([2, 1 if little_endian else 2, 1]) + b"\x00" * 9
    # e_type=ET_EXEC, e_machine, e_version
    return ident + struct.pack(f"{order}HHI", 2, machine, 1) + b"\x00" * 40


def build_macho_thin(cpu_type: int, little_endian: bool = True) -> bytes:
    """Minimal 64-bit thin Mach-O header."""
    order = "<" if little_endian else ">"
    return struct.pack(f"{order}IIII", 0xFEEDFACF, cpu_type, 0, 2) + b"\x00" * 16


def build_macho_fat(cpu_types: Iterable[int], fat64: bool = False) -> bytes:
    """Big-endian fat header followed by one fat_arch record per CPU type."""
    cpu_types = list(cpu_types)
    magic = 0xCAFEBABF if fat64 else 0xCAFEBABE
    data = struct.pack(">II", magic, len(cpu_types))
    for index, cpu_type in enumerate(cpu_types):
        offset = 0x4000 * (index + 1)
        if fat64:
            data += struct.pack(">IIQQII", cpu_type, 0, offset, 0x1000, 14, 0)
        else:
            data += struct.pack(">IIIII", cpu_type, 0, offset, 0x1000, 14)
    return data


@pytest.fixture
def elf_x86_64() -> bytes:
    return build_elf(EM_X86_64)


@pytest.fixture
def elf_arm64() -> bytes:
    return build_elf(EM_AARCH64)


@pytest.fixture
def universal_binary() -> bytes:
    return build_macho_fat([CPU_TYPE_X86_64, CPU_TYPE_ARM64])


@pytest.fixture
def header_builders():
    """Expose the header builders to test modules."""

    class Builders:
        elf = staticmethod(build_elf)
        macho_thin = staticmethod(build_macho_thin)
        macho_fat = staticmethod(build_macho_fat)

    return Builders


FakeJavaFactory = Callable[..., Path]


@pytest.fixture
def fake_java(tmp_path: Path) -> FakeJavaFactory:
    """Factory creating a Java ``bin`` directory with a scripted ``java``.

    The script prints ``banner`` to stderr (or stdout) and exits with
    ``exit_code``. Pass ``jdk=True`` to add a ``javac`` beside it.
    """
    counter = [0]

    def _create(
        banner: str = JDK17_BANNER,
        *,
        to_stdout: bool = False,
        exit_code: int = 0,
        sleep: Optional[float] = None,
        jdk: bool = False,
        exe_name: str = "java",
    ) -> Path:
        counter[0] += 1
        bin_dir = tmp_path / f"jdk{counter[0]}" / "bin"
        bin_dir.mkdir(parents=True)

        banner_file = bin_dir / "banner.txt"
        banner_file.write_text(banner, encoding="utf-8")

        lines = ["#!/bin/sh"]
        if sleep is not None:
            lines.append(f"sleep {sleep}")
        redirect = "" if to_stdout else " >&2"
        lines.append(f'cat "{banner_file}"{redirect}')
        lines.append(f"exit {exit_code}")

        java = bin_dir / exe_name
        java.write_text("\n".join(lines) + "\n", encoding="utf-8")
        java.chmod(java.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

        if jdk:
            javac_name = "javac.exe" if exe_name.endswith(".exe") else "javac"
            (bin_dir / javac_name).write_text("", encoding="utf-8")

        return bin_dir

    return _create


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point JAVAPROBE_HOME at an empty directory."""
    home = tmp_path / "javaprobe-home"
    home.mkdir()
    monkeypatch.setenv("JAVAPROBE_HOME", str(home))
    return home
