"""Tests for OperationResult and attempt."""

import pytest

from solidkit.core import OperationResult, UnsupportedOperation, attempt


class TestOperationResult:
    """Tests for OperationResult."""
    
    def test_ok(self):
        result = OperationResult.ok(20, operation="area")
        
        assert result.success
        assert result.value == 20
        assert result.error is None
        assert result.operation == "area"
        assert result.unwrap() == 20
    
    def test_unsupported(self):
        error = UnsupportedOperation("I can't swim", operation="swim", implementer="Sparrow")
        result = OperationResult.unsupported(error)
        
        assert not result.success
        assert result.error is error
        assert result.operation == "swim"
        assert result.message == "I can't swim"
    
    def test_unwrap_raises_stored_error(self):
        error = UnsupportedOperation("nope")
        
        with pytest.raises(UnsupportedOperation) as exc_info:
            OperationResult.unsupported(error).unwrap()
        
        assert exc_info.value is error
    
    def test_message_of_success(self):
        assert OperationResult.ok("Engine started").message == "Engine started"


class TestAttempt:
    """Tests for attempt."""
    
    def test_captures_unsupported(self):
        def refuse():
            raise UnsupportedOperation("refused", operation="fly")
        
        result = attempt(refuse)
        
        assert not result.success
        assert str(result.error) == "refused"
    
    def test_wraps_value(self):
        result = attempt(lambda: 42, operation="answer")
        
        assert result.success
        assert result.value == 42
        assert result.operation == "answer"
    
    def test_other_exceptions_propagate(self):
        def broken():
            raise KeyError("x")
        
        with pytest.raises(KeyError):
            attempt(broken)
