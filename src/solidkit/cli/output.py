"""
Output - Console output formatting.

Provides pretty-printed output with colors and formatting.
"""

import sys
import textwrap
from typing import Optional, TextIO

from ..catalog import Example
from ..core.audit import AuditFinding


class Colors:
    """ANSI color codes."""
    
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"


class Symbols:
    """Unicode symbols for output."""
    
    CHECK = "✓"
    CROSS = "✗"
    ARROW = "→"
    DOT = "•"
    WARN = "⚠"
    INFO = "ℹ"
    BOX_H = "─"


class Console:
    """Console output helper with colors and formatting."""
    
    def __init__(self, color: bool = True, verbose: bool = False, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.color = color and self.stream.isatty()
        self.verbose = verbose
    
    def _c(self, text: str, *codes: str) -> str:
        """Apply color codes to text."""
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET
    
    def print(self, text: str = "") -> None:
        """Print text."""
        print(text, file=self.stream)
    
    def header(self, text: str) -> None:
        """Print a header."""
        width = max(len(text) + 4, 50)
        border = self._c(Symbols.BOX_H * width, Colors.CYAN) if self.color else "-" * width
        
        self.print()
        self.print(border)
        self.print(self._c(f"  {text}", Colors.BOLD, Colors.CYAN))
        self.print(border)
        self.print()
    
    def section(self, text: str) -> None:
        """Print a section header."""
        self.print()
        self.print(self._c(f"{Symbols.ARROW} {text}", Colors.BOLD, Colors.BLUE))
    
    def success(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.CHECK} {text}", Colors.GREEN))
    
    def error(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.CROSS} {text}", Colors.RED))
    
    def warning(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.WARN} {text}", Colors.YELLOW))
    
    def info(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.INFO} {text}", Colors.CYAN))
    
    def detail(self, text: str) -> None:
        """Print detail text (dimmed)."""
        self.print(self._c(f"    {text}", Colors.DIM))
    
    def item(self, text: str, status: Optional[str] = None) -> None:
        """Print a list item."""
        status_str = ""
        if status == "ok":
            status_str = self._c(f" [{Symbols.CHECK}]", Colors.GREEN)
        elif status == "fail":
            status_str = self._c(f" [{Symbols.CROSS}]", Colors.RED)
        elif status:
            status_str = self._c(f" [{status}]", Colors.DIM)
        
        self.print(f"    {Symbols.DOT} {text}{status_str}")
    
    def table(self, headers: list[str], rows: list[list[str]]) -> None:
        """Print a simple table."""
        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(widths):
                    widths[i] = max(widths[i], len(str(cell)))
        
        header_line = "  " + "  ".join(
            self._c(h.ljust(widths[i]), Colors.BOLD)
            for i, h in enumerate(headers)
        )
        self.print(header_line)
        self.print("  " + "  ".join("-" * w for w in widths))
        
        for row in rows:
            row_line = "  " + "  ".join(
                str(cell).ljust(widths[i]) if i < len(widths) else str(cell)
                for i, cell in enumerate(row)
            )
            self.print(row_line)
    
    # -------------------------------------------------------------------------
    # Domain views
    # -------------------------------------------------------------------------
    
    def example_table(self, examples: list[Example]) -> None:
        """Print the catalog as a table."""
        rows = [
            [e.key, e.principle.title, e.variant.value]
            for e in examples
        ]
        self.table(["Key", "Principle", "Variant"], rows)
    
    def example(self, example: Example) -> None:
        """Print one example's principle and explanation."""
        self.header(example.title)
        self.info(example.principle.statement)
        self.print()
        for line in textwrap.wrap(example.explanation, 72):
            self.detail(line)
        self.print()
        self.detail(f"Module: {example.module}")
    
    def transcript(self, example: Example, lines: list[str]) -> None:
        """Print the output of a demonstration."""
        self.section(example.title)
        for line in lines:
            self.item(line)
    
    def audit_findings(self, title: str, findings: list[AuditFinding]) -> None:
        """Print the findings of one substitutability audit."""
        self.section(title)
        for finding in findings:
            label = f"{finding.implementer}.{finding.operation}()"
            if finding.substitutable:
                self.item(label, "ok")
            else:
                self.item(f"{label}: {finding.failure}", "fail")

