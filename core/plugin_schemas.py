"""
Plugin Schemas Module

Pydantic models for the structured objects exchanged with the host:

- Inputs: DatasourceConfiguration, ActionConfiguration, ExecutionContext
- Outputs: ExecutionOutput, DatasourceMetadataDto (tables/columns)

The host speaks camelCase (`databaseName`, `useSsl`, `dbSchema`); every
model accepts both the wire keys and the snake_case attribute names, and
`model_dump(by_alias=True)` produces the wire shape again.

Input fields are all optional on purpose: the plugin, not pydantic,
reports which part of the configuration is missing.
"""

from enum import Enum
from typing import Optional, List, Dict, Any, Union

from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class HostModel(BaseModel):
    """Base for host-facing models (camelCase aliases, extra keys ignored)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @classmethod
    def coerce(cls, value: Any):
        """Accept a model instance, a host dict, or None."""
        if value is None:
            return None
        return cls.model_validate(value)


# =============================================================================
# Datasource Configuration
# =============================================================================

class Endpoint(HostModel):
    host: Optional[str] = None
    port: Optional[int] = None


class CustomField(HostModel):
    """Host wrapper for plugin-specific values: `{ "value": ... }`."""
    value: Optional[str] = None


class AuthenticationCustom(HostModel):
    database_name: Optional[CustomField] = None


class Authentication(HostModel):
    username: Optional[str] = None
    password: Optional[str] = None
    custom: Optional[AuthenticationCustom] = None

    @property
    def database_name(self) -> Optional[str]:
        """`custom.databaseName.value`, or None anywhere along the path."""
        if self.custom is None or self.custom.database_name is None:
            return None
        return self.custom.database_name.value


class ConnectionSettings(HostModel):
    use_ssl: Optional[bool] = None


class DatasourceConfiguration(HostModel):
    """Connection parameters supplied by the host for one call."""
    endpoint: Optional[Endpoint] = None
    authentication: Optional[Authentication] = None
    connection: Optional[ConnectionSettings] = None

    @property
    def use_ssl(self) -> bool:
        return bool(self.connection and self.connection.use_ssl)


# =============================================================================
# Action / Execution Context
# =============================================================================

class ActionConfiguration(HostModel):
    """The SQL statement to run. Already resolved by the host."""
    body: Optional[str] = None


class ExecutionContext(HostModel):
    """Runtime values bound into the statement."""
    prepared_statement_context: Optional[Union[Dict[str, Any], List[Any]]] = None


# =============================================================================
# Outputs
# =============================================================================

class ExecutionOutput(HostModel):
    """Normalized query result."""
    output: List[Dict[str, Any]] = Field(default_factory=list)


class TableType(str, Enum):
    TABLE = "table"


class Column(HostModel):
    name: str
    type: str


class Table(HostModel):
    name: str
    type: TableType = TableType.TABLE
    columns: List[Column] = Field(default_factory=list)


class DatabaseSchema(HostModel):
    tables: List[Table] = Field(default_factory=list)


class DatasourceMetadataDto(HostModel):
    db_schema: Optional[DatabaseSchema] = None
