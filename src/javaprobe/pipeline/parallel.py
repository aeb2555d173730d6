"""Parallel probing of several Java installations using ThreadPoolExecutor."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from javaprobe.bootstrap.platform import PlatformInfo, get_platform_info
from javaprobe.config.models import DEFAULT_MAX_WORKERS, ProbeConfig
from javaprobe.core.logging import get_logger
from javaprobe.runtime.record import JavaRuntimeRecord

LOGGER = get_logger(__name__)


@dataclass
class ProbeOutcome:
    """Result of probing one directory.

    ``record`` is None when the directory holds no usable runtime; ``error``
    is set only if probing raised.
    """

    directory: Path
    record: Optional[JavaRuntimeRecord] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.record is not None


class ParallelRuntimeProber:
    """Probes many Java installation directories concurrently.

    Outcomes are returned in input order; one failing directory never
    aborts the batch.
    """

    def __init__(
        self,
        max_workers: int = DEFAULT_MAX_WORKERS,
        sequential: bool = False,
    ) -> None:
        """Initialize the prober.

        Args:
            max_workers: Maximum number of concurrent probe threads.
            sequential: If True, probe one directory at a time (for debugging).
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self._max_workers = max_workers
        self._sequential = sequential

    def probe_all(
        self,
        directories: Sequence[Union[str, Path]],
        user_imported: bool = False,
        host: Optional[PlatformInfo] = None,
        config: Optional[ProbeConfig] = None,
    ) -> List[ProbeOutcome]:
        """Probe every directory and return one outcome per input.

        Args:
            directories: Java ``bin`` directories to probe.
            user_imported: Flag given to every created record.
            host: Platform to evaluate against; detected once when omitted.
            config: Probe settings shared by all directories.
        """
        paths = [Path(d) for d in directories]
        if not paths:
            return []

        host = host or get_platform_info()
        config = config or ProbeConfig()

        if self._sequential or len(paths) == 1:
            return [self._probe_one(p, user_imported, host, config) for p in paths]
        return self._probe_parallel(paths, user_imported, host, config)

    def _probe_parallel(
        self,
        paths: List[Path],
        user_imported: bool,
        host: PlatformInfo,
        config: ProbeConfig,
    ) -> List[ProbeOutcome]:
        outcomes: Dict[int, ProbeOutcome] = {}

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            future_to_index = {
                executor.submit(self._probe_one, path, user_imported, host, config): index
                for index, path in enumerate(paths)
            }

            for future in as_completed(future_to_index):
                index = future_to_index[future]
                try:
                    outcomes[index] = future.result()
                except Exception as e:
                    LOGGER.error(f"Probing {paths[index]} raised exception: {e}")
                    outcomes[index] = ProbeOutcome(paths[index], error=str(e))

        return [outcomes[index] for index in range(len(paths))]

    @staticmethod
    def _probe_one(
        path: Path,
        user_imported: bool,
        host: PlatformInfo,
        config: ProbeConfig,
    ) -> ProbeOutcome:
        """Probe a single directory.

        This method is thread-safe and catches all exceptions.
        """
        LOGGER.info(f"Probing {path}...")
        try:
            record = JavaRuntimeRecord.create(path, user_imported, host=host, config=config)
        except Exception as e:
            LOGGER.error(f"Probing {path} failed: {e}")
            return ProbeOutcome(path, error=str(e))
        if record is None:
            LOGGER.info(f"{path}: no usable Java runtime")
        return ProbeOutcome(path, record)
