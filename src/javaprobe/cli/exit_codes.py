"""Exit codes for the javaprobe CLI."""

EXIT_SUCCESS = 0
EXIT_RUNTIME_MISSING = 2
EXIT_INVALID_USAGE = 3
