"""
Custom Exceptions Module

Base exception for every error the plugin raises, so the host can catch
one type and render `to_dict()` to the end user.

Usage:
    from utils.exceptions import PluginError

    try:
        await plugin.execute(...)
    except PluginError as e:
        logger.error(f"Step failed: {e}")
"""

from typing import Optional, Dict, Any


class PluginError(Exception):
    """
    Base exception for all plugin errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details (optional)
        status_code: HTTP status code the host may return (optional)
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }
