"""Batch probing of Java installations."""

from javaprobe.pipeline.parallel import ParallelRuntimeProber, ProbeOutcome

__all__ = ["ParallelRuntimeProber", "ProbeOutcome"]
