"""
Exit Codes - Process exit codes returned by the CLI.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the solidkit command."""
    
    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    NOT_FOUND = 3
    AUDIT_FAILED = 4
