"""
Plugin Exceptions Module

Classified integration errors raised by datasource plugins.
All of them are IntegrationError, the single kind the host renders;
the subclass tells the host which stage failed.

Messages carry the underlying driver message so the end user sees
the real cause.
"""

from typing import Optional, Dict, Any

from utils.exceptions import PluginError


class IntegrationError(PluginError):
    """Base exception for errors talking to an integration (datasource)."""

    def __init__(
        self,
        message: str = "Integration error",
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message=message, details=details, status_code=status_code)


class DatasourceConfigurationError(IntegrationError):
    """A required part of the datasource configuration is missing."""

    MESSAGES = {
        "datasource": "Datasource not found for {plugin} step",
        "endpoint": "Endpoint not specified for {plugin} step",
        "authentication": "Authentication not specified for {plugin} step",
        "database": "Database not specified for {plugin} step",
    }

    def __init__(self, plugin_name: str, field: str):
        template = self.MESSAGES.get(field, "{field} not specified for {plugin} step")
        super().__init__(
            message=template.format(plugin=plugin_name, field=field),
            details={"plugin": plugin_name, "field": field},
            status_code=400
        )
        self.field = field


class ConnectionFailedError(IntegrationError):
    """Failed to open a session (or to introspect through one)."""

    def __init__(self, plugin_name: str, error: str):
        super().__init__(
            message=f"Failed to connect to {plugin_name}, {error}",
            details={"plugin": plugin_name},
            status_code=502
        )


class QueryFailedError(IntegrationError):
    """The caller's SQL statement failed."""

    def __init__(self, plugin_name: str, error: str):
        super().__init__(
            message=f"{plugin_name} query failed, {error}",
            details={"plugin": plugin_name},
            status_code=500
        )


class TestConnectionFailedError(IntegrationError):
    """The connectivity check failed."""

    def __init__(self, plugin_name: str, error: str):
        super().__init__(
            message=f"Test {plugin_name} connection failed, {error}",
            details={"plugin": plugin_name},
            status_code=502
        )
