"""
Engine Port - The abstraction a car depends on.
"""

from abc import abstractmethod

from .capability import Capability


class Engine(Capability):
    """An engine that can be started."""
    
    operation_name = "start"
    
    @abstractmethod
    def start(self) -> str:
        """Start the engine and report it."""
        ...
