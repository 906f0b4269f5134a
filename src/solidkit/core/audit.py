"""
Substitutability Audit - Flag implementers that break their abstraction's contract.

An implementer that fails with UnsupportedOperation where its abstraction
promises success cannot stand in for its siblings.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .exceptions import UnsupportedOperation
from .results import OperationResult, attempt


logger = logging.getLogger("SubstitutabilityAudit")


@dataclass
class AuditFinding:
    """Outcome of invoking one operation on one implementer."""
    
    implementer: str
    operation: str
    substitutable: bool
    value: Any = None
    failure: Optional[str] = None
    
    @classmethod
    def from_result(cls, implementer: Any, result: OperationResult, operation: str) -> "AuditFinding":
        return cls(
            implementer=type(implementer).__name__,
            operation=operation,
            substitutable=result.success,
            value=result.value,
            failure=None if result.success else str(result.error),
        )


def supports(obj: Any, capability: type) -> bool:
    """Check capability membership before invoking an operation."""
    return isinstance(obj, capability)


def invoke(implementer: Any, operation: str) -> Any:
    """
    Call a named operation on an implementer.
    
    Raises:
        UnsupportedOperation: If the implementer has no such operation,
            or the operation itself refuses
    """
    method = getattr(implementer, operation, None)
    if method is None:
        raise UnsupportedOperation(
            f"{type(implementer).__name__} has no operation '{operation}'",
            operation=operation,
            implementer=type(implementer).__name__,
        )
    return method()


def audit_substitutability(implementers: Iterable[Any], operation: str) -> list[AuditFinding]:
    """
    Invoke operation on every implementer and report which ones fail.
    
    Args:
        implementers: Objects claiming the same contract
        operation: Name of the operation the contract promises
        
    Returns:
        One AuditFinding per implementer, in input order
    """
    findings = []
    for implementer in implementers:
        result = attempt(lambda: invoke(implementer, operation), operation=operation)
        finding = AuditFinding.from_result(implementer, result, operation)
        if finding.substitutable:
            logger.debug(f"{finding.implementer}.{operation}() ok")
        else:
            logger.info(f"{finding.implementer}.{operation}() is not substitutable: {finding.failure}")
        findings.append(finding)
    return findings


def all_substitutable(findings: Iterable[AuditFinding]) -> bool:
    """True if no finding was flagged."""
    return all(f.substitutable for f in findings)
