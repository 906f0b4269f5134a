"""
Core module - Capability contracts and the consumer that depends on them.

This module contains:
- ports/: Abstract capabilities that providers must implement
- consumer: The dependency holder that delegates to an injected capability
- results: Explicit success/failure records
- audit: Substitutability checks
- exceptions: Centralized exception hierarchy
"""

from .exceptions import (
    SolidKitError,
    UnsupportedOperation,
    MissingCapabilityError,
    ExampleNotFoundError,
    ConfigError,
)
from .results import OperationResult, attempt
from .consumer import CapabilityConsumer
from .audit import AuditFinding, audit_substitutability, all_substitutable, supports, invoke
from .ports import *

__all__ = [
    "SolidKitError",
    "UnsupportedOperation",
    "MissingCapabilityError",
    "ExampleNotFoundError",
    "ConfigError",
    "OperationResult",
    "attempt",
    "CapabilityConsumer",
    "AuditFinding",
    "audit_substitutability",
    "all_substitutable",
    "supports",
    "invoke",
    "Capability",
    "Shape",
    "Bird",
    "Flyable",
    "Swimmable",
    "Runnable",
    "Engine",
    "ConfigProviderPort",
    "AppConfig",
]
