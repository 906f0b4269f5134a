"""
Bird Port - The flight contract of a bird.
"""

from abc import abstractmethod

from .capability import Capability


class Bird(Capability):
    """
    A bird that answers how it flies.
    
    The contract is to describe the bird's flight. A bird that cannot fly
    says so; it does not fail.
    """
    
    operation_name = "fly"
    
    @abstractmethod
    def fly(self) -> str:
        """Describe how the bird flies."""
        ...
