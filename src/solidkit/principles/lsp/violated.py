"""
Liskov Substitution Principle - violated.

Boat is not substitutable for Vehicle: its drive() fails where Vehicle
promises to drive. Client code written against Vehicle breaks as soon as
it is handed a Boat.
"""

import logging
from abc import abstractmethod

from ...core.consumer import CapabilityConsumer
from ...core.exceptions import UnsupportedOperation
from ...core.ports.capability import Capability
from ...core.results import attempt


logger = logging.getLogger(__name__)


class Vehicle(Capability):
    """A vehicle with an engine that can be driven."""
    
    operation_name = "drive"
    
    @abstractmethod
    def start_engine(self) -> str:
        ...
    
    @abstractmethod
    def drive(self) -> str:
        ...


class Car(Vehicle):
    
    def start_engine(self) -> str:
        logger.debug("Engine started")
        return "Engine started"
    
    def drive(self) -> str:
        logger.debug("Driving on the road")
        return "Driving on the road"


class Boat(Vehicle):
    """Breaks the Vehicle contract. Kept as the anti-pattern."""
    
    def start_engine(self) -> str:
        logger.debug("Engine started")
        return "Engine started"
    
    def drive(self) -> str:
        raise UnsupportedOperation(
            "I can't drive, I can only float!",
            operation="drive",
            implementer="Boat",
        )


class Traveller(CapabilityConsumer[Vehicle]):
    """Starts the vehicle and drives off, trusting the Vehicle contract."""
    
    def travel(self) -> list[str]:
        return [self.capability.start_engine(), self.operate()]


def demonstrate() -> list[str]:
    lines = []
    for vehicle in (Car(), Boat()):
        name = type(vehicle).__name__
        result = attempt(Traveller(vehicle).travel, operation="drive")
        if result.success:
            lines.append(f"{name}: {', '.join(result.value)}")
        else:
            lines.append(f"{name}: Engine started, then failed: {result.error}")
    return lines
