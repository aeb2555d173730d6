"""javaprobe - Java runtime compatibility probe.

Determines the version, bitness and target architecture of a Java
installation and decides whether it can run on the current host.
"""

from javaprobe.core.models import CompatibilityVerdict, RuntimeInfo
from javaprobe.runtime.record import JavaRuntimeRecord

__version__ = "0.1.0"

__all__ = [
    "CompatibilityVerdict",
    "JavaRuntimeRecord",
    "RuntimeInfo",
    "__version__",
]
