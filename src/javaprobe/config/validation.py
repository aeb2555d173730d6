"""Configuration validation for javaprobe.

Validates configuration keys, value types and enumerated values.
Never raises; problems are returned (and logged) as warnings.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set

from javaprobe.binary.inspector import MIN_HEADER_READ_LIMIT
from javaprobe.core.logging import get_logger
from javaprobe.core.models import Architecture, HostOS

LOGGER = get_logger(__name__)

# Valid top-level keys
VALID_TOP_LEVEL_KEYS: Set[str] = {
    "probe",
    "scan",
    "output",
    "host",
}

# Valid keys per section
VALID_SECTION_KEYS: Dict[str, Set[str]] = {
    "probe": {"timeout", "header_read_limit"},
    "scan": {"max_workers"},
    "output": {"format"},
    "host": {"os", "arch"},
}

VALID_OUTPUT_FORMATS: Set[str] = {"table", "json"}

VALID_HOST_OS: Set[str] = {member.value for member in HostOS}

VALID_HOST_ARCH: Set[str] = {member.value for member in Architecture}


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate configuration dictionary.

    Args:
        data: Config dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    if not isinstance(data, dict):  # type: ignore[unreachable]
        warnings.append(ConfigValidationWarning(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
        ))
        return warnings  # type: ignore[unreachable]

    for key in data.keys():
        if key not in VALID_TOP_LEVEL_KEYS:
            _add(warnings, ConfigValidationWarning(
                message=f"Unknown top-level key '{key}'",
                source=source,
                key=key,
                suggestion=_suggest_key(key, VALID_TOP_LEVEL_KEYS),
            ))

    for section, valid_keys in VALID_SECTION_KEYS.items():
        section_data = data.get(section)
        if section_data is None:
            continue
        if not isinstance(section_data, dict):
            _add(warnings, ConfigValidationWarning(
                message=f"'{section}' must be a mapping, got {type(section_data).__name__}",
                source=source,
                key=section,
            ))
            continue
        for key in section_data.keys():
            if key not in valid_keys:
                _add(warnings, ConfigValidationWarning(
                    message=f"Unknown key '{section}.{key}'",
                    source=source,
                    key=f"{section}.{key}",
                    suggestion=_suggest_key(key, valid_keys),
                ))

    probe = data.get("probe")
    if isinstance(probe, dict):
        timeout = probe.get("timeout")
        if timeout is not None and (
            isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0
        ):
            _add(warnings, ConfigValidationWarning(
                message="'probe.timeout' must be a positive number",
                source=source,
                key="probe.timeout",
            ))

        read_limit = probe.get("header_read_limit")
        if read_limit is not None and (
            isinstance(read_limit, bool)
            or not isinstance(read_limit, int)
            or read_limit < MIN_HEADER_READ_LIMIT
        ):
            _add(warnings, ConfigValidationWarning(
                message=f"'probe.header_read_limit' must be an integer >= {MIN_HEADER_READ_LIMIT}",
                source=source,
                key="probe.header_read_limit",
            ))

    scan = data.get("scan")
    if isinstance(scan, dict):
        max_workers = scan.get("max_workers")
        if max_workers is not None and (
            isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1
        ):
            _add(warnings, ConfigValidationWarning(
                message="'scan.max_workers' must be a positive integer",
                source=source,
                key="scan.max_workers",
            ))

    output = data.get("output")
    if isinstance(output, dict):
        _check_choice(warnings, output.get("format"), VALID_OUTPUT_FORMATS, "output.format", source)

    host = data.get("host")
    if isinstance(host, dict):
        _check_choice(warnings, host.get("os"), VALID_HOST_OS, "host.os", source)
        _check_choice(warnings, host.get("arch"), VALID_HOST_ARCH, "host.arch", source)

    return warnings


def _check_choice(
    warnings: List[ConfigValidationWarning],
    value: Any,
    valid_values: Set[str],
    key: str,
    source: str,
) -> None:
    """Warn when ``value`` is set but not one of ``valid_values``."""
    if value is None:
        return
    if not isinstance(value, str):
        _add(warnings, ConfigValidationWarning(
            message=f"'{key}' must be a string, got {type(value).__name__}",
            source=source,
            key=key,
        ))
        return
    if value.lower() not in valid_values:
        _add(warnings, ConfigValidationWarning(
            message=f"Invalid value '{value}' for '{key}'. "
                    f"Valid values: {', '.join(sorted(valid_values))}",
            source=source,
            key=key,
            suggestion=_suggest_key(value.lower(), valid_values),
        ))


def _add(warnings: List[ConfigValidationWarning], warning: ConfigValidationWarning) -> None:
    warnings.append(warning)
    _log_warning(warning)


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a valid key for a potential typo.

    Args:
        invalid_key: The invalid key entered.
        valid_keys: Set of valid keys.

    Returns:
        Closest matching valid key, or None if no good match.
    """
    matches = get_close_matches(invalid_key, list(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    """Log a validation warning."""
    msg = f"{warning.message} in {warning.source}"
    if warning.suggestion:
        msg += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(msg)
