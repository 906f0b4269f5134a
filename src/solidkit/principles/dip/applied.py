"""
Dependency Inversion Principle - applied.

Car depends on the Engine abstraction and is handed an engine when it is
built. Switching from gas to electric changes the caller, not Car.
"""

from ...core.consumer import CapabilityConsumer
from ...core.ports.engine import Engine


class GasEngine(Engine):
    
    def start(self) -> str:
        return "Gas Engine started"


class ElectricEngine(Engine):
    
    def start(self) -> str:
        return "Electric Engine started"


class Car(CapabilityConsumer[Engine]):
    """A car that starts whatever engine it was given."""
    
    @property
    def engine(self) -> Engine:
        return self.capability
    
    def start(self) -> str:
        return self.operate()


def demonstrate() -> list[str]:
    return [
        f"Car with {type(engine).__name__}: {Car(engine).start()}"
        for engine in (GasEngine(), ElectricEngine())
    ]
