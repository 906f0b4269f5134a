"""
Config Provider Port - Abstract interface for configuration sources.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AppConfig:
    """Complete application configuration."""
    
    verbose: bool = False
    color: bool = True
    
    # Default principle filter for listings (acronym, e.g. "ocp")
    principle: Optional[str] = None


class ConfigProviderPort(ABC):
    """
    Abstract interface for configuration providers.
    
    Implementations can load config from environment variables,
    files, or any other source.
    """
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Get the provider name."""
        ...
    
    @abstractmethod
    def load(self) -> AppConfig:
        """Load the complete configuration."""
        ...
    
    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a single configuration value."""
        ...
    
    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        ...
    
    @abstractmethod
    def validate(self) -> list[str]:
        """
        Validate configuration.
        
        Returns:
            List of validation errors (empty if valid)
        """
        ...
