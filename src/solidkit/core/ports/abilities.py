"""
Ability Ports - Narrow, single-operation capabilities.

Implementers pick only the abilities they actually have.
"""

from abc import abstractmethod

from .capability import Capability


class Flyable(Capability):
    """Something that can fly."""
    
    operation_name = "fly"
    
    @abstractmethod
    def fly(self) -> str:
        ...


class Swimmable(Capability):
    """Something that can swim."""
    
    operation_name = "swim"
    
    @abstractmethod
    def swim(self) -> str:
        ...


class Runnable(Capability):
    """Something that can run."""
    
    operation_name = "run"
    
    @abstractmethod
    def run(self) -> str:
        ...
