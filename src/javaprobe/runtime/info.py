"""Assembly of one RuntimeInfo snapshot.

Pipeline: probe the runtime for its banner, parse version and bitness,
inspect the executable header when the host strategy consults it, then
evaluate compatibility. Every failure is folded into the snapshot.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from javaprobe.binary.inspector import DEFAULT_HEADER_READ_LIMIT, inspect_executable
from javaprobe.bootstrap.paths import JavaInstallPaths
from javaprobe.bootstrap.platform import PlatformInfo
from javaprobe.compat.evaluator import evaluate_compatibility, get_strategy
from javaprobe.core.errors import ParseError, ProbeError
from javaprobe.core.logging import get_logger
from javaprobe.core.models import CompatibilityVerdict, ExecutableHeader, RuntimeInfo
from javaprobe.probe.banner import parse_banner
from javaprobe.probe.runner import RuntimeProbe

LOGGER = get_logger(__name__)


def collect_runtime_info(
    directory: Path,
    host: PlatformInfo,
    probe: RuntimeProbe,
    header_read_limit: int = DEFAULT_HEADER_READ_LIMIT,
) -> RuntimeInfo:
    """Probe the Java installation in ``directory`` and evaluate it for ``host``.

    Args:
        directory: Java ``bin`` directory.
        host: Platform the runtime would run on.
        probe: Runs ``java -version``.
        header_read_limit: Leading bytes read for header inspection.

    Returns:
        A complete snapshot. Probe failures yield verdict ERROR and
        major version 0; they are not raised.
    """
    paths = JavaInstallPaths(Path(directory), host.os)
    java_exe = paths.java_exe
    javaw_exe = paths.javaw_exe

    try:
        banner_text = probe.probe(java_exe)
    except ProbeError as e:
        LOGGER.debug(f"Probe failed: {e}")
        return RuntimeInfo.failed(java_exe, javaw_exe, str(e))

    banner = parse_banner(banner_text)
    is_jre = paths.is_jre()

    if banner.major_version == 0:
        LOGGER.debug(f"{java_exe}: no version in banner {banner_text.strip()!r}")
        return RuntimeInfo(
            major_version=0,
            is_64bit=banner.is_64bit,
            is_jre=is_jre,
            is_fat_binary=False,
            verdict=CompatibilityVerdict.ERROR,
            java_exe=java_exe,
            javaw_exe=javaw_exe,
            error="version banner could not be parsed",
        )

    header: Optional[ExecutableHeader] = None
    parse_error: Optional[str] = None
    if get_strategy(host.os).inspects_binary:
        try:
            header = inspect_executable(java_exe, read_limit=header_read_limit)
        except ParseError as e:
            LOGGER.debug(f"No architecture detected: {e}")
            parse_error = str(e)

    evaluation = evaluate_compatibility(host, banner.major_version, banner.is_64bit, header)

    error = parse_error
    if evaluation.error is not None:
        error = evaluation.error.message
        LOGGER.warning(f"{java_exe}: {error}")

    info = RuntimeInfo(
        major_version=banner.major_version,
        is_64bit=banner.is_64bit,
        is_jre=is_jre,
        is_fat_binary=header.is_fat if header is not None else False,
        verdict=evaluation.verdict,
        java_exe=java_exe,
        javaw_exe=javaw_exe,
        architectures=header.architectures if header is not None else (),
        error=error,
    )
    LOGGER.debug(
        f"{java_exe}: Java {info.major_version} "
        f"({'64' if info.is_64bit else '32'}-bit) -> {info.verdict.value}"
    )
    return info
