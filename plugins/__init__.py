"""
Datasource Plugins Package

Plugins the host loads to run steps against external datasources.
"""

from plugins.base import BasePlugin, close_connection
from plugins.exceptions import (
    IntegrationError,
    DatasourceConfigurationError,
    ConnectionFailedError,
    QueryFailedError,
    TestConnectionFailedError,
)
from plugins.normalize import normalize_table_column_names

__all__ = [
    "BasePlugin",
    "close_connection",
    "IntegrationError",
    "DatasourceConfigurationError",
    "ConnectionFailedError",
    "QueryFailedError",
    "TestConnectionFailedError",
    "normalize_table_column_names",
]
