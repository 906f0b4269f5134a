"""
CLI Module - Command Line Interface for solidkit.
"""

from .app import main, run
from .exit_codes import ExitCode
from .output import Console

__all__ = ["main", "run", "ExitCode", "Console"]
