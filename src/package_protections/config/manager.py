"""
Configuration manager for package protections.

Loads the YAML settings file, applies environment variable overrides and
validates the result into a ProtectionsConfig.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .settings import ProtectionsConfig

ENV_PREFIX = "PACKAGE_PROTECTIONS_"


class ConfigManager:
    """
    Manages YAML-configurable settings for protection resolution.

    Precedence: defaults -> YAML file -> environment variables.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize ConfigManager.

        Args:
            config_path: Path to YAML configuration file. If None, uses default locations.
        """
        self.config_path = self._resolve_config_path(config_path)
        self._config_data: Dict[str, Any] = {}
        self._load_config()

    def _resolve_config_path(self, config_path: Optional[Union[str, Path]]) -> Path:
        """Resolve configuration file path."""
        if config_path:
            return Path(config_path)

        env_path = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
        if env_path:
            return Path(env_path)

        default_paths = [
            Path("package_protections.yml"),
            Path("config/package_protections.yml"),
        ]

        for path in default_paths:
            if path.exists():
                return path

        return default_paths[0]

    def _load_config(self) -> None:
        """Load configuration from YAML file, if present."""
        if self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML configuration: {e}") from e
            except OSError as e:
                raise ConfigurationError(
                    f"Failed to load configuration from {self.config_path}: {e}"
                ) from e
            if not isinstance(data, dict):
                raise ConfigurationError(
                    f"Configuration in {self.config_path} must be a mapping"
                )
            self._config_data = data
        else:
            self._config_data = {}

        self._apply_env_overrides()

        try:
            self.settings = ProtectionsConfig(**self._config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {self.config_path}: {e}",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            f"{ENV_PREFIX}GLOBALLY_PERMITTED_NAMESPACES": "globally_permitted_namespaces",
            f"{ENV_PREFIX}EXPECTED_PACKAGE_DIRECTORIES": "expected_package_directories",
            f"{ENV_PREFIX}ROOT_PACKAGE_NAME": "root_package_name",
            f"{ENV_PREFIX}LOG_LEVEL": "log_level",
            f"{ENV_PREFIX}LOG_FORMAT": "log_format",
        }

        for env_var, key in env_mappings.items():
            value_str = os.getenv(env_var)
            if value_str is not None:
                # List fields accept comma-separated values via ProtectionsConfig
                self._config_data[key] = value_str

    def get_config_dict(self) -> Dict[str, Any]:
        """Get the effective configuration as a dictionary."""
        return self.settings.model_dump()

    def save_config(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Save current configuration to YAML file."""
        save_path = Path(path) if path else self.config_path
        save_path.parent.mkdir(parents=True, exist_ok=True)

        with open(save_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.get_config_dict(), f, default_flow_style=False, indent=2)
        return save_path

    def reload_config(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def __repr__(self) -> str:
        """String representation of ConfigManager."""
        return f"ConfigManager(config_path={self.config_path})"
