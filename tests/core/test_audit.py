"""Tests for the substitutability audit."""

import pytest

from solidkit.core import (
    Flyable,
    Runnable,
    Swimmable,
    UnsupportedOperation,
    all_substitutable,
    audit_substitutability,
    invoke,
    supports,
)
from solidkit.principles.isp import applied as isp_applied
from solidkit.principles.isp import violated as isp_violated
from solidkit.principles.lsp import applied as lsp_applied
from solidkit.principles.lsp import violated as lsp_violated


class TestAuditSubstitutability:
    """Tests for audit_substitutability."""
    
    def test_flags_boat(self):
        findings = audit_substitutability([lsp_violated.Car(), lsp_violated.Boat()], "drive")
        
        assert [f.implementer for f in findings] == ["Car", "Boat"]
        assert findings[0].substitutable
        assert findings[0].value == "Driving on the road"
        assert not findings[1].substitutable
        assert findings[1].failure == "I can't drive, I can only float!"
        assert not all_substitutable(findings)
    
    def test_applied_birds_pass(self):
        findings = audit_substitutability([lsp_applied.Sparrow(), lsp_applied.Penguin()], "fly")
        
        assert all_substitutable(findings)
        assert findings[1].value == "I can't fly but I can swim"
    
    def test_flags_catch_all_interface(self):
        animals = [isp_violated.Sparrow(), isp_violated.Penguin()]
        
        swim = audit_substitutability(animals, "swim")
        fly = audit_substitutability(animals, "fly")
        run = audit_substitutability(animals, "run")
        
        assert [f.substitutable for f in swim] == [False, True]
        assert [f.substitutable for f in fly] == [True, False]
        assert all_substitutable(run)
    
    def test_missing_operation_is_flagged(self):
        findings = audit_substitutability([isp_applied.Penguin()], "fly")
        
        assert not findings[0].substitutable
        assert "has no operation 'fly'" in findings[0].failure
    
    def test_empty(self):
        assert audit_substitutability([], "fly") == []
        assert all_substitutable([])


class TestSupportsAndInvoke:
    """Tests for capability membership and named invocation."""
    
    def test_supports(self):
        sparrow = isp_applied.Sparrow()
        
        assert supports(sparrow, Flyable)
        assert supports(sparrow, Runnable)
        assert not supports(sparrow, Swimmable)
    
    def test_invoke(self):
        assert invoke(isp_applied.Penguin(), "swim") == "I can swim in water"
    
    def test_invoke_excluded_operation(self):
        with pytest.raises(UnsupportedOperation) as exc_info:
            invoke(isp_applied.Penguin(), "fly")
        
        assert exc_info.value.operation == "fly"
        assert exc_info.value.implementer == "Penguin"
