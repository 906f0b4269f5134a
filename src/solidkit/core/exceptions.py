"""
Exceptions - Centralized exception hierarchy for solidkit.
"""

from typing import Optional


class SolidKitError(Exception):
    """Base class for all solidkit errors."""


class UnsupportedOperation(SolidKitError):
    """
    Raised by an implementer asked to perform an operation outside its nature.

    Attributes:
        operation: Name of the operation that was requested
        implementer: Class name of the object that refused it
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        implementer: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.implementer = implementer

    def __str__(self) -> str:
        return self.message


class MissingCapabilityError(SolidKitError, ValueError):
    """Raised when a consumer is constructed without a capability."""


class ExampleNotFoundError(SolidKitError, LookupError):
    """Raised when a catalog lookup does not match any example or principle."""


class ConfigError(SolidKitError):
    """Raised for invalid configuration."""
