"""Configuration file loading and merging.

Handles loading configuration from YAML files with:
- Project-level config (.javaprobe.yml)
- Global config (~/.javaprobe/config/config.yml)
- Environment variable expansion (${VAR})
- Config merging with proper precedence
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from javaprobe.binary.inspector import MIN_HEADER_READ_LIMIT
from javaprobe.bootstrap.paths import JavaProbePaths
from javaprobe.config.models import (
    HostConfig,
    JavaProbeConfig,
    OutputConfig,
    ProbeConfig,
    ScanConfig,
)
from javaprobe.config.validation import (
    VALID_HOST_ARCH,
    VALID_HOST_OS,
    VALID_OUTPUT_FORMATS,
    validate_config,
)
from javaprobe.core.errors import JavaProbeError
from javaprobe.core.logging import get_logger

LOGGER = get_logger(__name__)

# Config file names
PROJECT_CONFIG_NAMES = [".javaprobe.yml", ".javaprobe.yaml", "javaprobe.yml", "javaprobe.yaml"]

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(JavaProbeError):
    """Configuration loading or parsing error."""


def load_config(
    project_root: Path,
    cli_config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> JavaProbeConfig:
    """Load configuration with proper precedence.

    Precedence (highest to lowest):
    1. CLI flags (cli_overrides)
    2. Custom config file (cli_config_path) OR project config (.javaprobe.yml)
    3. Global config (~/.javaprobe/config/config.yml)
    4. Built-in defaults

    Args:
        project_root: Directory searched for a project config file.
        cli_config_path: Optional path to custom config file (--config flag).
        cli_overrides: Dict of CLI flag overrides.

    Returns:
        Merged JavaProbeConfig instance.

    Raises:
        ConfigError: If specified config file doesn't exist or has parse errors.
    """
    sources: List[str] = []
    merged: Dict[str, Any] = {}

    # Layer 1: Global config
    global_path = find_global_config()
    if global_path:
        try:
            global_dict = load_yaml_file(global_path)
            validate_config(global_dict, source=str(global_path))
            merged = merge_configs(merged, global_dict)
            sources.append(f"global:{global_path}")
            LOGGER.debug(f"Loaded global config from {global_path}")
        except (OSError, yaml.YAMLError, ConfigError) as e:
            LOGGER.warning(f"Failed to load global config: {e}")

    # Layer 2: Project or custom config
    config_path = cli_config_path
    source_kind = "custom"
    if config_path is None:
        config_path = find_project_config(project_root)
        source_kind = "project"
    elif not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    if config_path is not None:
        try:
            file_dict = load_yaml_file(config_path)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e
        validate_config(file_dict, source=str(config_path))
        merged = merge_configs(merged, file_dict)
        sources.append(f"{source_kind}:{config_path}")
        LOGGER.debug(f"Loaded {source_kind} config from {config_path}")

    # Layer 3: CLI overrides
    if cli_overrides:
        validate_config(cli_overrides, source="command line")
        merged = merge_configs(merged, cli_overrides)
        sources.append("cli")
        LOGGER.debug("Applied CLI overrides")

    config = dict_to_config(merged)
    config._config_sources = sources

    LOGGER.debug(f"Config loaded from sources: {sources}")
    return config


def find_project_config(project_root: Path) -> Optional[Path]:
    """Find config file in project root.

    Args:
        project_root: Directory to search in.

    Returns:
        Path to config file if found, None otherwise.
    """
    for name in PROJECT_CONFIG_NAMES:
        config_path = project_root / name
        if config_path.exists():
            return config_path
    return None


def find_global_config() -> Optional[Path]:
    """Find global config at ~/.javaprobe/config/config.yml.

    Returns:
        Path to global config if it exists, None otherwise.
    """
    config_path = JavaProbePaths.default().global_config
    if config_path.exists():
        return config_path
    return None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Performs environment variable expansion on string values.

    Args:
        path: Path to YAML file.

    Returns:
        Parsed dictionary.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
        FileNotFoundError: If file doesn't exist.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    data = yaml.safe_load(content)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in config values.

    Supports ${VAR} and ${VAR:-default} syntax.
    """
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Replace environment variable reference with its value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def merge_configs(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two config dicts, with overlay taking precedence.

    Rules:
    - Scalar values: overlay replaces base
    - Lists: overlay replaces base (no merging)
    - Dicts: recursive merge
    """
    result = base.copy()

    for key, overlay_value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(overlay_value, dict):
            result[key] = merge_configs(result[key], overlay_value)
        else:
            result[key] = overlay_value

    return result


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name)
    return value if isinstance(value, dict) else {}


def _number(value: Any, default: float, minimum: float, *, integer: bool = False) -> Any:
    kinds = (int,) if integer else (int, float)
    if isinstance(value, bool) or not isinstance(value, kinds) or value < minimum:
        return default
    return value


def _choice(value: Any, valid: set, default: Optional[str]) -> Optional[str]:
    if isinstance(value, str) and value.lower() in valid:
        return value.lower()
    return default


def dict_to_config(data: Dict[str, Any]) -> JavaProbeConfig:
    """Convert a merged config dict to a typed JavaProbeConfig.

    Values that failed validation fall back to their defaults.
    """
    defaults = JavaProbeConfig()

    probe_data = _section(data, "probe")
    timeout = _number(probe_data.get("timeout"), defaults.probe.timeout, 0)
    probe = ProbeConfig(
        timeout=float(timeout) if timeout > 0 else defaults.probe.timeout,
        header_read_limit=_number(
            probe_data.get("header_read_limit"),
            defaults.probe.header_read_limit,
            MIN_HEADER_READ_LIMIT,
            integer=True,
        ),
    )

    scan_data = _section(data, "scan")
    scan = ScanConfig(
        max_workers=_number(scan_data.get("max_workers"), defaults.scan.max_workers, 1, integer=True),
    )

    output_data = _section(data, "output")
    output = OutputConfig(
        format=_choice(output_data.get("format"), VALID_OUTPUT_FORMATS, defaults.output.format)
        or defaults.output.format,
    )

    host_data = _section(data, "host")
    host = HostConfig(
        os=_choice(host_data.get("os"), VALID_HOST_OS, None),
        arch=_choice(host_data.get("arch"), VALID_HOST_ARCH, None),
    )

    return JavaProbeConfig(probe=probe, scan=scan, output=output, host=host)
