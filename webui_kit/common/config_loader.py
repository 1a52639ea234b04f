"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - YAML configuration loading (path from WEBUI_CONFIG or config/webui.yaml)
    - Environment variable override (WEBUI_POLL_INTERVAL overrides webui.poll_interval)
    - Dot notation path access
    - Default value support

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from webui_kit.exceptions import ConfigurationError


CONFIG_PATH_ENV = "WEBUI_CONFIG"

# Default configuration file path, relative to the working directory
DEFAULT_CONFIG_PATH = Path("config") / "webui.yaml"


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (WEBUI_POLL_INTERVAL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("webui.poll_interval", 0.5)
        0.25  # From YAML or env var

    Environment Variable Mapping:
        - webui.poll_interval -> WEBUI_POLL_INTERVAL
        - logging.level -> LOGGING_LEVEL
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton: configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file. Falls back to the
                WEBUI_CONFIG environment variable, then DEFAULT_CONFIG_PATH.
        """
        if getattr(self, "_initialized", False):
            return

        env_path = os.environ.get(CONFIG_PATH_ENV)
        self._config_path = Path(config_path or env_path or DEFAULT_CONFIG_PATH)
        self._load_config()
        self._initialized = True

    @property
    def config_path(self) -> Path:
        return self._config_path

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.debug(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "webui.poll_interval")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section, or an empty dict."""
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """Reset singleton instance so the next access reloads the file."""
        cls._instance = None
        cls._config = {}


__all__ = [
    "ConfigLoader",
    "DEFAULT_CONFIG_PATH",
]
