"""
Capability Port - The abstract operation contract every provider implements.
"""

from abc import ABC
from typing import Any, ClassVar


class Capability(ABC):
    """
    Abstract base for all capabilities.
    
    A capability promises exactly one named operation. Subclasses set
    ``operation_name`` and declare that operation as an abstract method;
    ``perform()`` is the uniform entry point consumers call.
    """
    
    operation_name: ClassVar[str] = ""
    
    def perform(self) -> Any:
        """Invoke the operation this capability promises."""
        return getattr(self, self.operation_name)()
    
    @classmethod
    def describe(cls) -> str:
        """Get a one-line description of the contract."""
        return f"{cls.__name__}.{cls.operation_name}()"
