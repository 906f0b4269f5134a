"""Tests for console output."""

import io

from solidkit.catalog import get_example
from solidkit.cli.output import Console
from solidkit.core import AuditFinding


class TestConsole:
    
    def make_console(self):
        out = io.StringIO()
        return Console(color=True, stream=out), out
    
    def test_no_color_when_not_a_tty(self):
        console, out = self.make_console()
        
        console.success("done")
        
        assert not console.color
        assert out.getvalue() == "  ✓ done\n"
    
    def test_table(self):
        console, out = self.make_console()
        
        console.table(["Key", "Variant"], [["ocp-applied", "applied"]])
        
        lines = out.getvalue().splitlines()
        assert lines[0].split() == ["Key", "Variant"]
        assert lines[2].split() == ["ocp-applied", "applied"]
    
    def test_example_wraps_explanation(self):
        console, out = self.make_console()
        
        console.example(get_example("isp-violated"))
        
        text = out.getvalue()
        assert "Interface Segregation Principle - violated" in text
        assert all(len(line) <= 80 for line in text.splitlines())
    
    def test_audit_findings(self):
        console, out = self.make_console()
        
        console.audit_findings("Vehicle.drive", [
            AuditFinding("Car", "drive", True, value="Driving on the road"),
            AuditFinding("Boat", "drive", False, failure="I can't drive, I can only float!"),
        ])
        
        text = out.getvalue()
        assert "Car.drive() [✓]" in text
        assert "Boat.drive(): I can't drive, I can only float! [✗]" in text
