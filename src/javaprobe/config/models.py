"""Typed configuration for javaprobe."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from javaprobe.binary.inspector import DEFAULT_HEADER_READ_LIMIT
from javaprobe.probe.runner import DEFAULT_PROBE_TIMEOUT

DEFAULT_MAX_WORKERS = 4
DEFAULT_OUTPUT_FORMAT = "table"


@dataclass
class ProbeConfig:
    """How each Java installation is probed.

    Attributes:
        timeout: Seconds to wait for ``java -version`` to exit.
        header_read_limit: Leading bytes read from the executable for
            header inspection.
    """

    timeout: float = DEFAULT_PROBE_TIMEOUT
    header_read_limit: int = DEFAULT_HEADER_READ_LIMIT


@dataclass
class ScanConfig:
    """How several installations are probed together."""

    max_workers: int = DEFAULT_MAX_WORKERS


@dataclass
class OutputConfig:
    """Output formatting."""

    format: str = DEFAULT_OUTPUT_FORMAT


@dataclass
class HostConfig:
    """Optional overrides of the detected host platform."""

    os: Optional[str] = None
    arch: Optional[str] = None


@dataclass
class JavaProbeConfig:
    """Complete javaprobe configuration."""

    probe: ProbeConfig = field(default_factory=ProbeConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    host: HostConfig = field(default_factory=HostConfig)

    # Where the configuration came from, e.g. ["global:...", "cli"]
    _config_sources: List[str] = field(default_factory=list, repr=False)

    @property
    def sources(self) -> List[str]:
        return list(self._config_sources)
