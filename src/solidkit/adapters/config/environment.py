"""
Environment Config Provider - Load configuration from environment variables.

Supports, in increasing precedence:
- .env files
- Environment variables (SOLIDKIT_VERBOSE, SOLIDKIT_COLOR, NO_COLOR, SOLIDKIT_PRINCIPLE)
- Command line argument overrides
"""

import os
from pathlib import Path
from typing import Any, Optional

from ...catalog import Principle
from ...core.exceptions import ExampleNotFoundError
from ...core.ports.config_provider import AppConfig, ConfigProviderPort


ENV_MAPPING = {
    "SOLIDKIT_VERBOSE": "verbose",
    "SOLIDKIT_COLOR": "color",
    "SOLIDKIT_PRINCIPLE": "principle",
}


def _coerce(raw_value: str) -> Any:
    """Convert boolean-ish strings, leave everything else alone."""
    if raw_value.lower() in ("true", "1", "yes"):
        return True
    if raw_value.lower() in ("false", "0", "no"):
        return False
    return raw_value


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables and .env files.
    """
    
    def __init__(
        self,
        env_file: Optional[Path] = None,
        cli_overrides: Optional[dict[str, Any]] = None,
        environ: Optional[dict[str, str]] = None,
    ):
        """
        Initialize the config provider.
        
        Args:
            env_file: Path to .env file (auto-detected if not specified)
            cli_overrides: Command line argument overrides
            environ: Environment mapping (defaults to os.environ)
        """
        self._values: dict[str, Any] = {}
        self._env_file = env_file
        self._cli_overrides = cli_overrides or {}
        self._environ = os.environ if environ is None else environ
        
        self._load_env_file()
        self._load_environment()
        self._apply_cli_overrides()
    
    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------
    
    @property
    def name(self) -> str:
        return "Environment"
    
    def load(self) -> AppConfig:
        """Load complete configuration."""
        principle = self.get("principle")
        return AppConfig(
            verbose=bool(self.get("verbose", False)),
            color=bool(self.get("color", True)),
            principle=str(principle).lower() if principle else None,
        )
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        key = key.lower().replace("-", "_")
        return self._values.get(key, default)
    
    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        key = key.lower().replace("-", "_")
        self._values[key] = value
    
    def validate(self) -> list[str]:
        """Validate configuration."""
        errors = []
        
        principle = self.get("principle")
        if principle:
            try:
                Principle.from_string(str(principle))
            except ExampleNotFoundError:
                errors.append(
                    f"Unknown principle {principle!r} - expected one of "
                    f"{', '.join(p.acronym for p in Principle)}"
                )
        
        return errors
    
    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------
    
    def _load_env_file(self) -> None:
        """Load values from .env file."""
        env_file = self._find_env_file()
        if not env_file:
            return
        
        for line in env_file.read_text().splitlines():
            line = line.strip()
            
            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue
            
            if "=" not in line:
                continue
            
            key, value = line.split("=", 1)
            key = key.strip().upper()
            value = value.strip().strip('"').strip("'")
            
            if key in ENV_MAPPING:
                self._values[ENV_MAPPING[key]] = _coerce(value)
            elif key == "NO_COLOR":
                self._values["color"] = False
    
    def _find_env_file(self) -> Optional[Path]:
        """Find .env file."""
        if self._env_file is not None:
            return self._env_file if self._env_file.exists() else None
        
        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            return cwd_env
        
        return None
    
    def _load_environment(self) -> None:
        """Load values from environment variables."""
        for env_key, config_key in ENV_MAPPING.items():
            raw_value = self._environ.get(env_key)
            if raw_value is not None:
                self._values[config_key] = _coerce(raw_value)
        
        # https://no-color.org: presence disables colour regardless of value
        if "NO_COLOR" in self._environ:
            self._values["color"] = False
    
    def _apply_cli_overrides(self) -> None:
        """Apply CLI argument overrides."""
        cli_mapping = {
            "verbose": "verbose",
            "no_color": "color",
            "principle": "principle",
        }
        
        for cli_key, config_key in cli_mapping.items():
            value = self._cli_overrides.get(cli_key)
            if value is None:
                continue
            if cli_key == "no_color":
                if value:
                    self._values["color"] = False
                continue
            if cli_key == "verbose" and not value:
                continue
            self._values[config_key] = value
