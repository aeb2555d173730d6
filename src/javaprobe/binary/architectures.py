"""Lookup tables from raw machine codes to Architecture members."""

from __future__ import annotations

from typing import Dict

from javaprobe.core.models import Architecture

# ELF e_machine values
EM_386 = 0x03
EM_ARM = 0x28
EM_X86_64 = 0x3E
EM_AARCH64 = 0xB7
EM_RISCV = 0xF3
EM_LOONGARCH = 0x102

ELF_MACHINE_ARCHITECTURES: Dict[int, Architecture] = {
    EM_386: Architecture.X86,
    EM_X86_64: Architecture.X86_64,
    EM_ARM: Architecture.ARM32,
    EM_AARCH64: Architecture.ARM64,
    EM_RISCV: Architecture.RISCV64,
    EM_LOONGARCH: Architecture.LOONGARCH64,
}

# Mach-O cpu_type_t values (<mach/machine.h>)
CPU_ARCH_ABI64 = 0x01000000
CPU_ARCH_ABI64_32 = 0x02000000
CPU_TYPE_X86 = 7
CPU_TYPE_X86_64 = CPU_TYPE_X86 | CPU_ARCH_ABI64
CPU_TYPE_ARM = 12
CPU_TYPE_ARM64 = CPU_TYPE_ARM | CPU_ARCH_ABI64
CPU_TYPE_ARM64_32 = CPU_TYPE_ARM | CPU_ARCH_ABI64_32
CPU_TYPE_POWERPC = 18
CPU_TYPE_POWERPC64 = CPU_TYPE_POWERPC | CPU_ARCH_ABI64

MACHO_CPU_TYPE_ARCHITECTURES: Dict[int, Architecture] = {
    CPU_TYPE_X86: Architecture.X86,
    CPU_TYPE_X86_64: Architecture.X86_64,
    CPU_TYPE_ARM: Architecture.ARM32,
    CPU_TYPE_ARM64: Architecture.ARM64,
}


def architecture_from_elf_machine(machine: int) -> Architecture:
    """Map an ELF e_machine value; unknown values map to OTHER."""
    return ELF_MACHINE_ARCHITECTURES.get(machine, Architecture.OTHER)


def architecture_from_macho_cpu_type(cpu_type: int) -> Architecture:
    """Map a Mach-O cputype; unknown values (ARM64_32, PowerPC, ...) map to OTHER."""
    return MACHO_CPU_TYPE_ARCHITECTURES.get(cpu_type, Architecture.OTHER)
