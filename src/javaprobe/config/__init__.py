"""Configuration loading for javaprobe."""

from javaprobe.config.loader import ConfigError, load_config
from javaprobe.config.models import (
    HostConfig,
    JavaProbeConfig,
    OutputConfig,
    ProbeConfig,
    ScanConfig,
)

__all__ = [
    "ConfigError",
    "HostConfig",
    "JavaProbeConfig",
    "OutputConfig",
    "ProbeConfig",
    "ScanConfig",
    "load_config",
]
