"""
Core Module

Schemas shared between the host and the plugins.
"""

from .plugin_schemas import (
    DatasourceConfiguration,
    Endpoint,
    Authentication,
    AuthenticationCustom,
    CustomField,
    ConnectionSettings,
    ActionConfiguration,
    ExecutionContext,
    ExecutionOutput,
    TableType,
    Column,
    Table,
    DatabaseSchema,
    DatasourceMetadataDto,
)

__all__ = [
    "DatasourceConfiguration",
    "Endpoint",
    "Authentication",
    "AuthenticationCustom",
    "CustomField",
    "ConnectionSettings",
    "ActionConfiguration",
    "ExecutionContext",
    "ExecutionOutput",
    "TableType",
    "Column",
    "Table",
    "DatabaseSchema",
    "DatasourceMetadataDto",
]
