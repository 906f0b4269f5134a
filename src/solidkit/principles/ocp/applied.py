"""
Open-Closed Principle - applied.

Shape is open for extension (a new shape is a new subclass) and closed for
modification (nothing in Shape or AreaCalculator changes when one is added).
"""

import math

from ...core.consumer import CapabilityConsumer
from ...core.ports.shape import Shape


class Rectangle(Shape):
    
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
    
    def area(self) -> float:
        return self.width * self.height
    
    def __repr__(self) -> str:
        return f"Rectangle(width={self.width}, height={self.height})"


class Circle(Shape):
    
    def __init__(self, radius: float):
        self.radius = radius
    
    def area(self) -> float:
        return math.pi * self.radius ** 2
    
    def __repr__(self) -> str:
        return f"Circle(radius={self.radius})"


class AreaCalculator(CapabilityConsumer[Shape]):
    """Computes the area of whatever shape it was given."""
    
    def calculate(self) -> float:
        return self.operate()


def demonstrate() -> list[str]:
    lines = []
    for shape in (Rectangle(4, 5), Circle(2)):
        calculator = AreaCalculator(shape)
        lines.append(f"{shape!r} has area {calculator.calculate():.3f}")
    return lines
