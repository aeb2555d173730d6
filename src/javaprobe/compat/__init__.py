"""Compatibility evaluation between a host and a Java executable."""

from javaprobe.compat.evaluator import (
    CompatibilityStrategy,
    Evaluation,
    UnsupportedHostArchitecture,
    evaluate_compatibility,
    get_strategy,
)

__all__ = [
    "CompatibilityStrategy",
    "Evaluation",
    "UnsupportedHostArchitecture",
    "evaluate_compatibility",
    "get_strategy",
]
