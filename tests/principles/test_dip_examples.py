"""Tests for the Dependency Inversion examples."""

import pytest

from solidkit.core import Engine
from solidkit.principles.dip import applied, violated


class TestAppliedCar:
    
    @pytest.mark.parametrize("engine_cls, message", [
        (applied.GasEngine, "Gas Engine started"),
        (applied.ElectricEngine, "Electric Engine started"),
    ])
    def test_starts_injected_engine(self, engine_cls, message):
        assert applied.Car(engine_cls()).start() == message
    
    def test_accepts_any_engine(self):
        class TestEngine(Engine):
            def start(self):
                return "test engine"
        
        assert applied.Car(TestEngine()).start() == "test engine"
    
    def test_demonstrate(self):
        assert applied.demonstrate() == [
            "Car with GasEngine: Gas Engine started",
            "Car with ElectricEngine: Electric Engine started",
        ]


class TestViolatedCar:
    
    def test_builds_its_own_engine(self):
        car = violated.Car()
        
        assert isinstance(car.engine, violated.GasEngine)
        assert car.start() == "Gas Engine started"
    
    def test_engine_is_not_an_abstraction(self):
        assert not isinstance(violated.Car().engine, Engine)
    
    def test_demonstrate(self):
        assert violated.demonstrate()[0] == "Car built its own GasEngine: Gas Engine started"
