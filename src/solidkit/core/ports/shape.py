"""
Shape Port - Anything with an area.
"""

from abc import abstractmethod

from .capability import Capability


class Shape(Capability):
    """
    A shape that can compute its own area.
    
    New shapes are added by subclassing; nothing that consumes a Shape
    has to change.
    """
    
    operation_name = "area"
    
    @abstractmethod
    def area(self) -> float:
        """Compute the area of the shape."""
        ...
