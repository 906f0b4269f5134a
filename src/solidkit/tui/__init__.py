"""
TUI Module - Terminal browser for the SOLID examples.
"""

from .app import SolidBrowser, run_tui
from .data import BrowserState

__all__ = ["SolidBrowser", "run_tui", "BrowserState"]
