"""
Open-Closed Principle - violated.

ShapeCalculator switches on the shape's name. Adding a shape means adding
another branch to calculate_area, so every new shape modifies code that
already works.
"""

import math
from typing import Optional


class ShapeCalculator:
    """Computes areas by branching on a shape name. Kept as the anti-pattern."""
    
    def calculate_area(self, shape: str, width: float, height: float = 0) -> Optional[float]:
        """
        Compute the area of a named shape.
        
        For "circle", width is the diameter. Unknown shapes return None.
        """
        if shape == "rectangle":
            return width * height
        elif shape == "circle":
            return math.pi * (width / 2) ** 2
        return None


def demonstrate() -> list[str]:
    calculator = ShapeCalculator()
    lines = [
        f"rectangle 4x5 has area {calculator.calculate_area('rectangle', 4, 5):.3f}",
        f"circle of diameter 4 has area {calculator.calculate_area('circle', 4):.3f}",
    ]
    lines.append(f"triangle has area {calculator.calculate_area('triangle', 3, 4)} (needs a new branch)")
    return lines
