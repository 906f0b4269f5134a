"""Tests for the example catalog."""

import pytest

from solidkit.catalog import (
    AUDIT_SUITES,
    EXAMPLES,
    Principle,
    Variant,
    examples_for,
    get_example,
)
from solidkit.core import ExampleNotFoundError


class TestPrinciple:
    """Tests for Principle."""
    
    @pytest.mark.parametrize("text, expected", [
        ("ocp", Principle.OCP),
        ("  LSP ", Principle.LSP),
        ("Open-Closed Principle", Principle.OCP),
        ("open closed", Principle.OCP),
        ("liskov substitution", Principle.LSP),
        ("dependency inversion principle", Principle.DIP),
    ])
    def test_from_string(self, text, expected):
        assert Principle.from_string(text) is expected
    
    def test_from_string_unknown(self):
        with pytest.raises(ExampleNotFoundError):
            Principle.from_string("dry")
    
    def test_attributes(self):
        assert Principle.ISP.acronym == "ISP"
        assert Principle.ISP.title == "Interface Segregation Principle"
        assert "interfaces it does not use" in Principle.ISP.statement


class TestExamples:
    """Tests for the catalog contents."""
    
    def test_ten_examples_in_order(self):
        assert [e.key for e in EXAMPLES] == [
            "srp-applied", "srp-violated",
            "ocp-applied", "ocp-violated",
            "lsp-applied", "lsp-violated",
            "isp-applied", "isp-violated",
            "dip-applied", "dip-violated",
        ]
    
    def test_title_and_explanation_from_module(self):
        example = get_example("lsp-violated")
        
        assert example.title == "Liskov Substitution Principle - violated"
        assert example.explanation.startswith("Boat is not substitutable for Vehicle")
        assert example.module == "solidkit.principles.lsp.violated"
        assert example.variant is Variant.VIOLATED
    
    @pytest.mark.parametrize("example", EXAMPLES, ids=lambda e: e.key)
    def test_every_example_runs(self, example):
        lines = example.run()
        
        assert lines
        assert all(isinstance(line, str) for line in lines)
    
    def test_get_example_is_case_insensitive(self):
        assert get_example("DIP-Applied").key == "dip-applied"
    
    def test_get_example_unknown(self):
        with pytest.raises(ExampleNotFoundError):
            get_example("kiss-applied")
    
    def test_examples_for(self):
        assert [e.key for e in examples_for(Principle.SRP)] == ["srp-applied", "srp-violated"]
        assert len(examples_for()) == 10


class TestAuditSuites:
    """The audit flags only the violated variants."""
    
    def test_applied_suites_pass(self):
        for suite in AUDIT_SUITES:
            if suite.example_key.endswith("-applied"):
                assert all(f.substitutable for f in suite.run()), suite.title
    
    def test_violated_implementers_are_flagged(self):
        flagged = {
            (f.implementer, f.operation)
            for suite in AUDIT_SUITES
            for f in suite.run()
            if not f.substitutable
        }
        
        assert flagged == {("Boat", "drive"), ("Sparrow", "swim"), ("Penguin", "fly")}
    
    def test_suites_reference_catalog_examples(self):
        for suite in AUDIT_SUITES:
            assert get_example(suite.example_key)
