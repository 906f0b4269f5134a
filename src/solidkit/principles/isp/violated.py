"""
Interface Segregation Principle - violated.

Animal bundles fly, swim and run into one interface, so Sparrow must have
a swim() and Penguin must have a fly(), and both fail when called.
"""

from abc import ABC, abstractmethod

from ...core.exceptions import UnsupportedOperation
from ...core.results import attempt


class Animal(ABC):
    """One broad interface for every ability."""
    
    @abstractmethod
    def fly(self) -> str:
        ...
    
    @abstractmethod
    def swim(self) -> str:
        ...
    
    @abstractmethod
    def run(self) -> str:
        ...


class Sparrow(Animal):
    
    def fly(self) -> str:
        return "I can fly at a moderate speed"
    
    def swim(self) -> str:
        raise UnsupportedOperation("I can't swim, I can only fly!", operation="swim", implementer="Sparrow")
    
    def run(self) -> str:
        return "I can run on the ground"


class Penguin(Animal):
    
    def fly(self) -> str:
        raise UnsupportedOperation("I can't fly, I can only swim!", operation="fly", implementer="Penguin")
    
    def swim(self) -> str:
        return "I can swim in water"
    
    def run(self) -> str:
        return "I can run on the ground"


def demonstrate() -> list[str]:
    lines = []
    for animal in (Sparrow(), Penguin()):
        name = type(animal).__name__
        for operation in ("fly", "swim", "run"):
            result = attempt(getattr(animal, operation), operation=operation)
            status = result.value if result.success else f"unsupported ({result.error})"
            lines.append(f"{name}.{operation}: {status}")
    return lines
