"""
Liskov Substitution Principle - applied.

Sparrow and Penguin both honour Bird.fly: each describes its flight and
neither fails. Either can be used wherever a Bird is expected.
"""

import logging

from ...core.consumer import CapabilityConsumer
from ...core.ports.bird import Bird


logger = logging.getLogger(__name__)


class Sparrow(Bird):
    
    def fly(self) -> str:
        message = "I can fly at a moderate speed"
        logger.debug(message)
        return message


class Penguin(Bird):
    
    def fly(self) -> str:
        message = "I can't fly but I can swim"
        logger.debug(message)
        return message


class BirdWatcher(CapabilityConsumer[Bird]):
    """Watches one bird fly, whichever bird it is."""
    
    def observe(self) -> str:
        return self.operate()


def demonstrate() -> list[str]:
    return [
        f"{type(bird).__name__}: {BirdWatcher(bird).observe()}"
        for bird in (Sparrow(), Penguin())
    ]
