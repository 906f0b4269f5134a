"""DIP examples."""

from . import applied, violated

__all__ = ["applied", "violated"]
