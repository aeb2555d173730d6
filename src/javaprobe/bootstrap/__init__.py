"""
Bootstrap module for javaprobe.

This module handles:
- Host platform detection (OS + architecture)
- Java installation layout (java, javaw, javac) and the ~/.javaprobe home
- Executable validation before a runtime is spawned
"""

from javaprobe.bootstrap.platform import get_platform_info, resolve_platform, PlatformInfo
from javaprobe.bootstrap.paths import get_javaprobe_home, JavaInstallPaths, JavaProbePaths
from javaprobe.bootstrap.validation import validate_executable, ExecutableStatus

__all__ = [
    "get_platform_info",
    "resolve_platform",
    "PlatformInfo",
    "get_javaprobe_home",
    "JavaInstallPaths",
    "JavaProbePaths",
    "validate_executable",
    "ExecutableStatus",
]
