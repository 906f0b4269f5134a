"""
Principles - One subpackage per SOLID principle.

Each subpackage has two modules that deliberately reuse class names:
- applied: the principle followed
- violated: the principle broken, kept for comparison

Both expose demonstrate() returning the transcript of a short run.
"""

from . import srp, ocp, lsp, isp, dip

__all__ = ["srp", "ocp", "lsp", "isp", "dip"]
