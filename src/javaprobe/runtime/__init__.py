"""Java runtime records and the probe pipeline behind them."""

from javaprobe.runtime.info import collect_runtime_info
from javaprobe.runtime.record import JavaRuntimeRecord

__all__ = [
    "JavaRuntimeRecord",
    "collect_runtime_info",
]
