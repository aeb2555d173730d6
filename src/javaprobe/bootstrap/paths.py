"""Path management for javaprobe.

Handles the ~/.javaprobe directory (global configuration) and the layout of
the files javaprobe looks at inside a Java installation directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from javaprobe.core.models import HostOS

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".javaprobe"

# Environment variable to override home directory
JAVAPROBE_HOME_ENV = "JAVAPROBE_HOME"


def get_javaprobe_home() -> Path:
    """Get the javaprobe home directory path.

    Resolution order:
    1. JAVAPROBE_HOME environment variable (if set)
    2. ~/.javaprobe (default)

    Returns:
        Path to the javaprobe home directory.
    """
    env_home = os.environ.get(JAVAPROBE_HOME_ENV)
    if env_home:
        return Path(env_home)
    return Path.home() / DEFAULT_HOME_DIR_NAME


@dataclass(frozen=True)
class JavaInstallPaths:
    """Executable paths inside one Java ``bin`` directory.

    Layout:
        <dir>/java       (java.exe on Windows)   - primary executable
        <dir>/javaw.exe  (Windows only)          - GUI-mode executable
        <dir>/javac      (javac.exe on Windows)  - present only in a JDK
    """

    directory: Path
    host_os: HostOS

    _JAVA: ClassVar[str] = "java"
    _JAVAW: ClassVar[str] = "javaw"
    _JAVAC: ClassVar[str] = "javac"

    def _executable(self, name: str) -> Path:
        if self.host_os is HostOS.WINDOWS:
            return self.directory / f"{name}.exe"
        return self.directory / name

    @property
    def java_exe(self) -> Path:
        """Path to the primary ``java`` executable."""
        return self._executable(self._JAVA)

    @property
    def javaw_exe(self) -> Path:
        """Path to the GUI-mode executable; same as java_exe off Windows."""
        if self.host_os is HostOS.WINDOWS:
            return self._executable(self._JAVAW)
        return self.java_exe

    @property
    def javac_exe(self) -> Path:
        """Path to the compiler, whose presence marks a JDK."""
        return self._executable(self._JAVAC)

    def is_jre(self) -> bool:
        """Check whether the directory holds a JRE (no compiler present)."""
        return not self.javac_exe.exists()


@dataclass
class JavaProbePaths:
    """Manages paths within the javaprobe home directory.

    Directory structure:
        ~/.javaprobe/
            config/
                config.yml   - Global configuration
    """

    home: Path

    _CONFIG_DIR: ClassVar[str] = "config"
    _GLOBAL_CONFIG_NAME: ClassVar[str] = "config.yml"

    @classmethod
    def default(cls) -> "JavaProbePaths":
        """Create paths from the default javaprobe home."""
        return cls(get_javaprobe_home())

    @property
    def config_dir(self) -> Path:
        """Directory for configuration files."""
        return self.home / self._CONFIG_DIR

    @property
    def global_config(self) -> Path:
        """Path to the global configuration file."""
        return self.config_dir / self._GLOBAL_CONFIG_NAME
