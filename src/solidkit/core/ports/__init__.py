"""
Ports - Abstract interfaces that providers and adapters implement.

Ports define the contracts consumers depend on.
This enables dependency inversion and easy testing.
"""

from .capability import Capability
from .shape import Shape
from .bird import Bird
from .abilities import Flyable, Swimmable, Runnable
from .engine import Engine
from .config_provider import ConfigProviderPort, AppConfig

__all__ = [
    "Capability",
    "Shape",
    "Bird",
    "Flyable",
    "Swimmable",
    "Runnable",
    "Engine",
    "ConfigProviderPort",
    "AppConfig",
]
