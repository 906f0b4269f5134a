"""
Interface Segregation Principle - applied.

Each ability is its own interface. Sparrow implements Flyable and
Runnable, Penguin implements Swimmable and Runnable, and neither is made
to carry an operation it cannot perform.
"""

from ...core.audit import supports
from ...core.ports.abilities import Flyable, Runnable, Swimmable


class Sparrow(Flyable, Runnable):
    
    def fly(self) -> str:
        return "I can fly at a moderate speed"
    
    def run(self) -> str:
        return "I can run on the ground"


class Penguin(Swimmable, Runnable):
    
    def swim(self) -> str:
        return "I can swim in water"
    
    def run(self) -> str:
        return "I can run on the ground"


ABILITIES = (Flyable, Swimmable, Runnable)


def demonstrate() -> list[str]:
    lines = []
    for animal in (Sparrow(), Penguin()):
        name = type(animal).__name__
        for ability in ABILITIES:
            if supports(animal, ability):
                method = getattr(animal, ability.operation_name)
                lines.append(f"{name}.{ability.operation_name}: {method()}")
            else:
                lines.append(f"{name} is not {ability.__name__}, so it has no {ability.operation_name}()")
    return lines
