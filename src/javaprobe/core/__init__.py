"""Core domain model, error taxonomy and logging helpers for javaprobe."""
