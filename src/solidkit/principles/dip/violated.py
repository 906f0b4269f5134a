"""
Dependency Inversion Principle - violated.

Car builds its own GasEngine. It is tightly coupled to that class: a
different engine means editing Car, which also breaks the Open-Closed
principle.
"""


class GasEngine:
    
    def start(self) -> str:
        return "Gas Engine started"


class Car:
    """A car hard-wired to a gas engine. Kept as the anti-pattern."""
    
    def __init__(self):
        self.engine = GasEngine()
    
    def start(self) -> str:
        return self.engine.start()


def demonstrate() -> list[str]:
    car = Car()
    return [
        f"Car built its own {type(car.engine).__name__}: {car.start()}",
        "Using an electric engine would mean editing Car",
    ]
