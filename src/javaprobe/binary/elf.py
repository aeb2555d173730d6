"""ELF header reader.

Only ``e_machine`` is decoded. Layout of the start of an ELF header::

    0x00  e_ident[16]   magic, EI_CLASS, EI_DATA, EI_VERSION, EI_OSABI, ...
    0x10  e_type        u16
    0x12  e_machine     u16
"""

from __future__ import annotations

import struct

from javaprobe.binary.architectures import architecture_from_elf_machine
from javaprobe.core.errors import ParseError
from javaprobe.core.models import BinaryFormat, ExecutableHeader

ELF_MAGIC = b"\x7fELF"

EI_DATA = 5
ELFDATA2LSB = 1
ELFDATA2MSB = 2

E_TYPE_OFFSET = 16
E_MACHINE_OFFSET = 18

# Bytes needed to reach the end of e_machine
ELF_MIN_HEADER_SIZE = E_MACHINE_OFFSET + 2


def is_elf(data: bytes) -> bool:
    return data[:4] == ELF_MAGIC


def _byte_order(data: bytes) -> str:
    # ELFDATANONE and invalid encodings fall back to little-endian
    if data[EI_DATA] == ELFDATA2MSB:
        return ">"
    return "<"


def read_elf_machine(data: bytes) -> int:
    """Return the raw e_machine value of an ELF header.

    Raises:
        ParseError: If ``data`` is not an ELF header or is truncated.
    """
    if not is_elf(data):
        raise ParseError("not an ELF header")
    if len(data) < ELF_MIN_HEADER_SIZE:
        raise ParseError(
            f"ELF header truncated: {len(data)} bytes, need {ELF_MIN_HEADER_SIZE}"
        )
    (machine,) = struct.unpack_from(f"{_byte_order(data)}H", data, E_MACHINE_OFFSET)
    return machine


def parse_elf(data: bytes) -> ExecutableHeader:
    """Decode the target architecture of an ELF executable."""
    machine = read_elf_machine(data)
    return ExecutableHeader(
        format=BinaryFormat.ELF,
        architectures=(architecture_from_elf_machine(machine),),
        cpu_codes=(machine,),
    )
