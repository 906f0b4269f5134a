"""
Adapters - Concrete implementations of non-capability ports.

This module contains implementations for:
- Config: Environment variables and .env files
"""

from .config import EnvironmentConfigProvider

__all__ = ["EnvironmentConfigProvider"]
