"""
solidkit - SOLID design principles, each shown applied and violated.

Subpackages:
- core/: Capability ports, the capability consumer, results and exceptions
- principles/: One subpackage per principle with applied and violated variants
- adapters/: Configuration sources
- cli/: Command line interface
- tui/: Terminal browser
"""

__version__ = "1.0.0"
