"""
Common utilities: configuration loading, timing settings and logging.
"""

from .config_loader import ConfigLoader
from .global_config import (
    WebUISettings,
    configure,
    get_logger,
    get_settings,
    init_logger,
    reset_settings,
)

__all__ = [
    "ConfigLoader",
    "WebUISettings",
    "configure",
    "get_logger",
    "get_settings",
    "init_logger",
    "reset_settings",
]
