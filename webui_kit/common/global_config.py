"""
================================================================================
Global Configuration
================================================================================

Library-wide timing defaults and Loguru logging setup.

Features:
    - WebUISettings: immutable snapshot of the timing defaults
    - Lazy loading from ConfigLoader (YAML + environment variables)
    - Programmatic overrides for test suites (configure / reset_settings)
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from .config_loader import ConfigLoader


DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False
_settings: Optional["WebUISettings"] = None
_settings_lock = threading.Lock()


@dataclass(frozen=True)
class WebUISettings:
    """
    Timing defaults shared by every control, page and wait.

    Attributes:
        default_implicit_wait_timeout: Seconds a control waits to resolve its element
        default_page_loading_timeout: Seconds a page waits to become available
        default_closing_timeout: Seconds a page waits to become unavailable
        poll_interval: Seconds between condition evaluations while waiting
    """
    default_implicit_wait_timeout: float = 3.0
    default_page_loading_timeout: float = 30.0
    default_closing_timeout: float = 3.0
    poll_interval: float = 0.5

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"{f.name} must be >= 0, got {value}")
        if self.poll_interval == 0:
            raise ValueError("poll_interval must be > 0")

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "WebUISettings":
        """Build settings from the ``webui`` section of the configuration."""
        values = {}
        for f in fields(cls):
            values[f.name] = float(config.get(f"webui.{f.name}", f.default))
        return cls(**values)


def get_settings() -> WebUISettings:
    """
    Returns the current settings, loading them from configuration on first use.
    """
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = WebUISettings.from_config(ConfigLoader())
                logger.debug(f"Web UI settings loaded: {_settings}")
    return _settings


def configure(**overrides: Any) -> WebUISettings:
    """
    Replace selected defaults for the whole process.

    Example:
        >>> configure(poll_interval=0.1, default_implicit_wait_timeout=5)

    Raises:
        ValueError: On unknown setting names or negative values
    """
    global _settings
    known = {f.name for f in fields(WebUISettings)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown Web UI setting(s): {', '.join(sorted(unknown))}")

    with _settings_lock:
        base = _settings or WebUISettings.from_config(ConfigLoader())
        _settings = replace(base, **{k: float(v) for k, v in overrides.items()})
    logger.debug(f"Web UI settings overridden: {overrides}")
    return _settings


def reset_settings() -> None:
    """Forget overrides; the next get_settings() reloads from configuration."""
    global _settings
    with _settings_lock:
        _settings = None


def init_logger(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        log_file: Optional log file path. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    config = ConfigLoader()
    log_level = (level or config.get("logging.level", "INFO")).upper()
    log_format = config.get("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = log_file or config.get("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_logger():
    """Returns the Loguru logger, initializing it on first use."""
    if not _logger_initialized:
        init_logger()
    return logger


__all__ = [
    "WebUISettings",
    "get_settings",
    "configure",
    "reset_settings",
    "init_logger",
    "get_logger",
]
