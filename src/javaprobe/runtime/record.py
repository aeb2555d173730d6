"""JavaRuntimeRecord: one probed Java installation."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional, Union

from javaprobe.bootstrap.platform import PlatformInfo, get_platform_info
from javaprobe.config.models import ProbeConfig
from javaprobe.core.logging import get_logger
from javaprobe.core.models import CompatibilityVerdict, RuntimeInfo
from javaprobe.probe.runner import RuntimeProbe
from javaprobe.runtime.info import collect_runtime_info

LOGGER = get_logger(__name__)


class JavaRuntimeRecord:
    """A Java installation directory and its latest probe snapshot.

    Records are built with :meth:`create`. The snapshot is replaced as a
    whole on :meth:`refresh_info`; readers always see a complete RuntimeInfo.
    """

    def __init__(
        self,
        directory_path: Path,
        info: RuntimeInfo,
        user_imported: bool,
        host: PlatformInfo,
        config: ProbeConfig,
    ) -> None:
        self._directory_path = directory_path
        self._info = info
        self._user_imported = user_imported
        self._host = host
        self._config = config
        self._lock = threading.Lock()

    @classmethod
    def create(
        cls,
        directory_path: Union[str, Path],
        user_imported: bool = False,
        *,
        host: Optional[PlatformInfo] = None,
        config: Optional[ProbeConfig] = None,
    ) -> Optional["JavaRuntimeRecord"]:
        """Probe ``directory_path`` and build a record for it.

        Args:
            directory_path: Java ``bin`` directory.
            user_imported: Whether the user added this runtime by hand.
            host: Platform to evaluate against; detected when omitted.
            config: Probe settings; defaults when omitted.

        Returns:
            The record, or None when the runtime is unusable (verdict ERROR)
            or probing failed unexpectedly.
        """
        directory = Path(directory_path)
        try:
            host = host or get_platform_info()
            config = config or ProbeConfig()
            info = _collect(directory, host, config)
        except Exception:
            LOGGER.exception(f"Unexpected failure probing {directory}")
            return None

        if info.verdict is CompatibilityVerdict.ERROR:
            LOGGER.info(f"Skipping {directory}: {info.error or 'unusable runtime'}")
            return None

        return cls(directory, info, user_imported, host, config)

    def refresh_info(self) -> bool:
        """Re-probe the installation and swap in the new snapshot.

        Returns:
            True if the new verdict is usable (anything but ERROR).
        """
        with self._lock:
            try:
                info = _collect(self._directory_path, self._host, self._config)
            except Exception as e:
                LOGGER.exception(f"Unexpected failure refreshing {self._directory_path}")
                info = RuntimeInfo.failed(
                    self._info.java_exe, self._info.javaw_exe, f"refresh failed: {e}"
                )
            self._info = info
            return info.verdict.is_usable

    @property
    def info(self) -> RuntimeInfo:
        return self._info

    @property
    def directory_path(self) -> Path:
        return self._directory_path

    @property
    def user_imported(self) -> bool:
        return self._user_imported

    @user_imported.setter
    def user_imported(self, value: bool) -> None:
        self._user_imported = value

    @property
    def host(self) -> PlatformInfo:
        return self._host

    @property
    def major_version(self) -> int:
        return self._info.major_version

    @property
    def is_64bit(self) -> bool:
        return self._info.is_64bit

    @property
    def is_jre(self) -> bool:
        return self._info.is_jre

    @property
    def is_fat_binary(self) -> bool:
        return self._info.is_fat_binary

    @property
    def verdict(self) -> CompatibilityVerdict:
        return self._info.verdict

    @property
    def java_exe(self) -> Path:
        return self._info.java_exe

    @property
    def javaw_exe(self) -> Path:
        return self._info.javaw_exe

    def __repr__(self) -> str:
        return (
            f"JavaRuntimeRecord({str(self._directory_path)!r}, "
            f"version={self.major_version}, verdict={self.verdict.value})"
        )


def _collect(directory: Path, host: PlatformInfo, config: ProbeConfig) -> RuntimeInfo:
    return collect_runtime_info(
        directory,
        host,
        RuntimeProbe(timeout=config.timeout),
        header_read_limit=config.header_read_limit,
    )
