"""
Datasource Plugin Infrastructure

Abstract base class every datasource plugin implements for the host.

The host does not hand the plugin a pool or intercept its methods.
Instead the connection lifecycle is injected:

- connection_factory(options) -> awaitable connection
- connection_closer(connection) -> awaitable None
- normalizer(rows) -> rows

Each public operation opens its own connection through the factory and
releases it through `_destroy_connection` on every exit path.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, List, Optional

from core.plugin_schemas import (
    ActionConfiguration,
    DatasourceConfiguration,
    DatasourceMetadataDto,
    ExecutionContext,
    ExecutionOutput,
)
from plugins.normalize import normalize_table_column_names
from utils.logging import get_logger

ConnectionFactory = Callable[[Any], Awaitable[Any]]
ConnectionCloser = Callable[[Any], Awaitable[None]]
RowNormalizer = Callable[[List[Dict[str, Any]]], List[Dict[str, Any]]]


async def close_connection(connection: Any) -> None:
    """Default teardown: await the connection's own close()."""
    await connection.close()


class BasePlugin(ABC):
    """
    Abstract base class for datasource plugins.

    Subclasses must implement:
    - execute(): run the action's statement
    - metadata(): describe the datasource schema
    - test(): connectivity check
    """

    plugin_name: str = "Plugin"

    def __init__(
        self,
        connection_factory: ConnectionFactory,
        connection_closer: ConnectionCloser = close_connection,
        normalizer: RowNormalizer = normalize_table_column_names,
    ):
        """
        Initialize plugin.

        Args:
            connection_factory: Opens a connection from driver options
            connection_closer: Releases a connection opened by the factory
            normalizer: Canonicalizes result column names
        """
        self.connection_factory = connection_factory
        self.connection_closer = connection_closer
        self.normalizer = normalizer
        self.logger = get_logger(type(self).__module__)

    # ------------------------------------------------------------------
    # Host capability set
    # ------------------------------------------------------------------

    def dynamic_properties(self) -> List[str]:
        """Action configuration fields the host resolves templates in."""
        return ["body"]

    def get_request(self, action_configuration: Optional[ActionConfiguration]) -> Optional[str]:
        """Raw request for the host's audit log."""
        action = ActionConfiguration.coerce(action_configuration)
        return action.body if action else None

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    async def _destroy_connection(self, connection: Any) -> None:
        """
        Release a connection, suppressing teardown failures.

        A failing close must never replace the operation's own outcome.
        """
        if connection is None:
            return
        try:
            await self.connection_closer(connection)
        except Exception as e:
            self.logger.warning(f"{self.plugin_name} connection close failed: {e}")

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    @abstractmethod
    async def execute(
        self,
        context: ExecutionContext,
        datasource_configuration: DatasourceConfiguration,
        action_configuration: ActionConfiguration,
    ) -> ExecutionOutput:
        pass

    @abstractmethod
    async def metadata(self, datasource_configuration: DatasourceConfiguration) -> DatasourceMetadataDto:
        pass

    @abstractmethod
    async def test(self, datasource_configuration: DatasourceConfiguration) -> None:
        pass
