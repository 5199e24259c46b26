"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (config, input)
    20-29: Run lookup errors
    40-49: Operation errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for snapraid-web CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1
    INTERRUPTED = 2  # Ctrl+C / SIGINT (conventionally 130, but we use 2 for simplicity)

    # Validation errors (10-19)
    INVALID_ARGUMENTS = 10
    CONFIG_ERROR = 11

    # Run lookup errors (20-29)
    RUN_NOT_FOUND = 20

    # Operation errors (40-49)
    STORE_ERROR = 40
    SNAPSHOT_ERROR = 41
    SERVER_ERROR = 42
