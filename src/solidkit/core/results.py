"""
Results - Explicit success/failure records for capability operations.

An OperationResult carries an UnsupportedOperation as data instead of
raising it, so the failure is part of the return contract.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .exceptions import UnsupportedOperation


@dataclass(frozen=True)
class OperationResult:
    """Result of invoking a capability operation."""
    
    success: bool
    value: Any = None
    error: Optional[UnsupportedOperation] = None
    operation: Optional[str] = None
    
    @classmethod
    def ok(cls, value: Any = None, operation: Optional[str] = None) -> "OperationResult":
        """Create a successful result."""
        return cls(success=True, value=value, operation=operation)
    
    @classmethod
    def unsupported(cls, error: UnsupportedOperation) -> "OperationResult":
        """Create a failed result from an UnsupportedOperation."""
        return cls(success=False, error=error, operation=error.operation)
    
    @property
    def message(self) -> str:
        """Human readable outcome."""
        if self.success:
            return str(self.value)
        return str(self.error)
    
    def unwrap(self) -> Any:
        """
        Get the value of a successful result.
        
        Raises:
            UnsupportedOperation: If the result is a failure
        """
        if self.error is not None:
            raise self.error
        return self.value


def attempt(func: Callable[[], Any], operation: Optional[str] = None) -> OperationResult:
    """
    Call func and capture an UnsupportedOperation as a failed result.
    
    Any other exception propagates.
    
    Args:
        func: Zero-argument callable performing the operation
        operation: Operation name recorded on a successful result
        
    Returns:
        OperationResult with the value or the captured error
    """
    try:
        value = func()
    except UnsupportedOperation as e:
        return OperationResult.unsupported(e)
    return OperationResult.ok(value, operation=operation)
