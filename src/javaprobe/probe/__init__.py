"""Runtime probing: spawning ``java -version`` and parsing its banner."""

from javaprobe.probe.banner import VersionBanner, parse_banner
from javaprobe.probe.runner import RuntimeProbe, run_version_query

__all__ = [
    "VersionBanner",
    "parse_banner",
    "RuntimeProbe",
    "run_version_query",
]
