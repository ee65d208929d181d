"""Process exit codes for the command-line entry point."""

EXIT_OK = 0
EXIT_REQUEST_FAILED = 1
EXIT_INVALID_CONFIG = 2
EXIT_NO_SAMPLES = 3


__all__ = [
    "EXIT_OK",
    "EXIT_REQUEST_FAILED",
    "EXIT_INVALID_CONFIG",
    "EXIT_NO_SAMPLES",
]
