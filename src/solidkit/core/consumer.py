"""
Capability Consumer - Performs work by delegating to an injected capability.

The consumer is bound to exactly one provider at construction. It never
builds the provider itself and never inspects which concrete class it got.
"""

import logging
from typing import Any, Generic, TypeVar

from .exceptions import MissingCapabilityError
from .ports.capability import Capability
from .results import OperationResult, attempt


C = TypeVar("C", bound=Capability)


class CapabilityConsumer(Generic[C]):
    """
    Base class for units that depend on a capability abstraction.
    
    Usage:
        calculator = AreaCalculator(Rectangle(4, 5))
        calculator.operate()        # 20
        calculator.try_operate()    # OperationResult(success=True, value=20, ...)
    """
    
    def __init__(self, capability: C):
        """
        Bind the consumer to its capability.
        
        Args:
            capability: The provider to delegate to
            
        Raises:
            MissingCapabilityError: If capability is None
        """
        if capability is None:
            raise MissingCapabilityError(
                f"{self.__class__.__name__} requires a capability to delegate to"
            )
        self._capability = capability
        self.logger = logging.getLogger(self.__class__.__name__)
    
    @property
    def capability(self) -> C:
        """The bound provider."""
        return self._capability
    
    def operate(self) -> Any:
        """Delegate to the bound capability. Errors propagate unchanged."""
        self.logger.debug(
            f"Delegating to {type(self._capability).__name__}.{self._capability.operation_name}()"
        )
        return self._capability.perform()
    
    def try_operate(self) -> OperationResult:
        """Delegate like operate(), reporting UnsupportedOperation as a result."""
        return attempt(self.operate, operation=self._capability.operation_name)
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._capability!r})"
