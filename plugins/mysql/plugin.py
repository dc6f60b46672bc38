"""
MySQL Plugin Module

Runs SQL steps and schema introspection against MySQL-compatible servers
(MySQL, MariaDB, Aurora MySQL).

Every operation is one straight line:
    validate config -> open connection -> one query -> transform -> close

Errors are classified per operation:
- connect():  DatasourceConfigurationError / ConnectionFailedError
- execute():  QueryFailedError (after connect)
- metadata(): ConnectionFailedError
- test():     TestConnectionFailedError
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from config.settings import settings
from core.plugin_schemas import (
    ActionConfiguration,
    Column,
    DatabaseSchema,
    DatasourceConfiguration,
    DatasourceMetadataDto,
    ExecutionContext,
    ExecutionOutput,
    Table,
)
from plugins.base import (
    BasePlugin,
    ConnectionCloser,
    ConnectionFactory,
    RowNormalizer,
    close_connection,
)
from plugins.exceptions import (
    ConnectionFailedError,
    DatasourceConfigurationError,
    QueryFailedError,
    TestConnectionFailedError,
)
from plugins.mysql.connection import MySQLConnectOptions, create_connection
from plugins.normalize import normalize_table_column_names

TEST_CONNECTION_TIMEOUT_MS = 5000

TABLE_QUERY = (
    "select COLUMN_NAME as name,"
    "       TABLE_NAME as table_name,"
    "       COLUMN_TYPE as column_type"
    " from information_schema.columns"
    " where table_schema = database()"
    " order by table_name, ordinal_position"
)

TEST_QUERY = "SELECT NOW()"


class MySQLPlugin(BasePlugin):
    """
    MySQL datasource plugin.

    Bindings from the execution context are passed to the driver as a
    named set (`%(name)s` placeholders), never as ordered parameters.
    """

    plugin_name = "MySQL"
    use_ordered_parameters = False

    def __init__(
        self,
        connection_factory: ConnectionFactory = create_connection,
        connection_closer: ConnectionCloser = close_connection,
        normalizer: RowNormalizer = normalize_table_column_names,
        connection_timeout_ms: Optional[int] = None,
    ):
        super().__init__(connection_factory, connection_closer, normalizer)
        self.connection_timeout_ms = connection_timeout_ms or settings.MYSQL_CONNECTION_TIMEOUT_MS

    # ------------------------------------------------------------------
    # Connection
    # ------------------------------------------------------------------

    async def connect(
        self,
        datasource_configuration: Optional[DatasourceConfiguration],
        connection_timeout_ms: Optional[int] = None,
    ) -> Any:
        """
        Validate the configuration and open a connection.

        The caller owns the returned connection and must release it.
        """
        if datasource_configuration is None:
            raise DatasourceConfigurationError(self.plugin_name, "datasource")

        try:
            config = DatasourceConfiguration.coerce(datasource_configuration)
        except ValidationError as e:
            raise ConnectionFailedError(self.plugin_name, str(e)) from e

        endpoint = config.endpoint
        auth = config.authentication
        if endpoint is None:
            raise DatasourceConfigurationError(self.plugin_name, "endpoint")
        if auth is None:
            raise DatasourceConfigurationError(self.plugin_name, "authentication")
        if not auth.database_name:
            raise DatasourceConfigurationError(self.plugin_name, "database")

        options = MySQLConnectOptions(
            host=endpoint.host,
            port=endpoint.port,
            user=auth.username,
            password=auth.password,
            database=auth.database_name,
            use_ssl=config.use_ssl,
            connect_timeout_ms=connection_timeout_ms or self.connection_timeout_ms,
        )

        connection = None
        try:
            connection = await self.connection_factory(options)
            self._attach_logger_to_connection(connection, config)
        except Exception as e:
            await self._destroy_connection(connection)
            raise ConnectionFailedError(self.plugin_name, str(e)) from e

        self.logger.debug(f"{self.plugin_name} connection created. {options.endpoint}")
        return connection

    def _attach_logger_to_connection(self, connection: Any, config: DatasourceConfiguration) -> None:
        if config.endpoint is None:
            return

        endpoint = f"{config.endpoint.host}:{config.endpoint.port}"

        def on_error(err: Exception) -> None:
            self.logger.debug(f"{self.plugin_name} connection error. {endpoint}", exc_info=err)

        def on_end() -> None:
            self.logger.debug(f"{self.plugin_name} connection ended. {endpoint}")

        connection.on("error", on_error)
        connection.on("end", on_end)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def execute(
        self,
        context: Optional[ExecutionContext],
        datasource_configuration: DatasourceConfiguration,
        action_configuration: Optional[ActionConfiguration],
    ) -> ExecutionOutput:
        """Run the action's SQL body on a fresh connection."""
        connection = await self.connect(datasource_configuration)
        try:
            return await self.execute_pooled(context, action_configuration, connection)
        finally:
            await self._destroy_connection(connection)

    async def execute_pooled(
        self,
        context: Optional[ExecutionContext],
        action_configuration: Optional[ActionConfiguration],
        connection: Any,
    ) -> ExecutionOutput:
        """
        Run the action's SQL body on a connection the caller owns.

        The connection is neither opened nor closed here.
        """
        try:
            action = ActionConfiguration.coerce(action_configuration)
            query = action.body if action else None
            if not query:
                return ExecutionOutput()

            execution_context = ExecutionContext.coerce(context)
            bindings = execution_context.prepared_statement_context if execution_context else None

            rows = await connection.query(query, bindings)
            return ExecutionOutput(output=self.normalizer(rows))
        except Exception as e:
            raise QueryFailedError(self.plugin_name, str(e)) from e

    async def metadata(self, datasource_configuration: DatasourceConfiguration) -> DatasourceMetadataDto:
        """List the tables and columns of the configured database."""
        connection = None
        try:
            connection = await self.connect(datasource_configuration)
            rows = await connection.query(TABLE_QUERY)
            tables = fold_tables(rows)
            return DatasourceMetadataDto(db_schema=DatabaseSchema(tables=tables))
        except ConnectionFailedError:
            raise
        except Exception as e:
            raise ConnectionFailedError(self.plugin_name, str(e)) from e
        finally:
            await self._destroy_connection(connection)

    async def test(self, datasource_configuration: DatasourceConfiguration) -> None:
        """Open a connection with a short timeout and run a liveness query."""
        connection = None
        try:
            connection = await self.connect(datasource_configuration, TEST_CONNECTION_TIMEOUT_MS)
            await connection.query(TEST_QUERY)
        except Exception as e:
            raise TestConnectionFailedError(self.plugin_name, str(e)) from e
        finally:
            await self._destroy_connection(connection)


def fold_tables(rows: Iterable[Mapping[str, Any]]) -> List[Table]:
    """
    Group introspection rows into tables.

    Tables appear in the order their name is first seen; columns keep
    the row order within each table.
    """
    tables: Dict[str, Table] = {}
    for row in rows:
        name = row["table_name"]
        table = tables.get(name)
        if table is None:
            table = tables[name] = Table(name=name)
        table.columns.append(Column(name=row["name"], type=row["column_type"]))
    return list(tables.values())
