"""Parsing of the banner printed by ``java -version``.

Typical banners::

    java version "1.8.0_301"
    Java(TM) SE Runtime Environment (build 1.8.0_301-b09)
    Java HotSpot(TM) 64-Bit Server VM (build 25.301-b09, mixed mode)

    openjdk version "17.0.2" 2022-01-18
    OpenJDK Runtime Environment (build 17.0.2+8-86)
    OpenJDK 64-Bit Server VM (build 17.0.2+8-86, mixed mode, sharing)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Quoted version token following the word "version"
VERSION_TOKEN_PATTERN = re.compile(r'version\s+"([\d._]+)')

# Leading integer of a version token
_LEADING_INT_PATTERN = re.compile(r"^(\d+)")

# Legacy "1.x" scheme used up to Java 8
_LEGACY_PATTERN = re.compile(r"^1\.(\d+)")

# VM bitness, e.g. "64-Bit Server VM"
BITNESS_PATTERN = re.compile(r"\b(\d+)-Bit\b")


@dataclass(frozen=True)
class VersionBanner:
    """Facts extracted from a version banner."""

    major_version: int
    is_64bit: bool


def parse_major_version(text: str) -> int:
    """Extract the Java major version from a banner.

    Returns 0 when no version token is present.
    """
    token_match = VERSION_TOKEN_PATTERN.search(text)
    if not token_match:
        return 0
    token = token_match.group(1)

    leading = _LEADING_INT_PATTERN.match(token)
    if not leading:
        return 0
    version = int(leading.group(1))

    if version == 1:
        legacy = _LEGACY_PATTERN.match(token)
        version = int(legacy.group(1)) if legacy else 0

    return version


def parse_is_64bit(text: str) -> bool:
    """Check whether the banner reports a 64-Bit VM."""
    match = BITNESS_PATTERN.search(text)
    return match is not None and match.group(1) == "64"


def parse_banner(text: str) -> VersionBanner:
    """Parse a full ``java -version`` banner.

    Malformed or empty banners degrade to ``VersionBanner(0, False)``.
    """
    return VersionBanner(
        major_version=parse_major_version(text),
        is_64bit=parse_is_64bit(text),
    )
