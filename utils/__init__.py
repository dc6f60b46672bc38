"""
Utilities Module

Shared utilities for the plugin:
- Logging configuration
- Base exception
"""

from .logging import get_logger, setup_logging
from .exceptions import PluginError

__all__ = ["get_logger", "setup_logging", "PluginError"]
