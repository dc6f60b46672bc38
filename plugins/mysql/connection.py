"""
MySQL Connection Module

aiomysql-backed connection used by the MySQL plugin.

- MySQLConnectOptions: everything the driver needs to open one session
- create_connection(): default connection factory (aiomysql)
- MySQLConnection: one session; query(), close(), on("error" | "end")
"""

import re
import ssl
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

import aiomysql

from utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PORT = 3306

Params = Optional[Union[Dict[str, Any], Sequence[Any]]]


_LITERAL_PERCENT = re.compile(r"%(?!\(\w+\)s)")


def escape_literal_percents(sql: str, params: Params) -> str:
    """
    Double every % that is not a %(name)s placeholder.

    The driver formats named bindings with `sql % args`, so a literal %
    (LIKE 'x%', DATE_FORMAT(d, '%Y')) must be escaped first. Without
    named bindings the SQL is sent as is.
    """
    if not params or not isinstance(params, Mapping):
        return sql
    return _LITERAL_PERCENT.sub("%%", sql)


@dataclass(frozen=True)
class MySQLConnectOptions:
    """
    Driver options for one connection.

    TLS is permissive: the server certificate is not verified.
    Public key retrieval is only allowed on plaintext connections.
    """
    host: Optional[str]
    port: Optional[int]
    user: Optional[str]
    password: Optional[str]
    database: str
    use_ssl: bool = False
    connect_timeout_ms: int = 30000

    @property
    def allow_public_key_retrieval(self) -> bool:
        return not self.use_ssl

    @property
    def endpoint(self) -> str:
        return f"{self.host}:{self.port}"

    def ssl_context(self) -> Optional[ssl.SSLContext]:
        if not self.use_ssl:
            return None
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context


class MySQLConnection:
    """
    A single MySQL session.

    Listeners registered with on() are diagnostic only: a failing
    listener is logged and ignored.
    """

    EVENTS = ("error", "end")

    def __init__(self, raw: Any):
        self._raw = raw
        self._listeners: Dict[str, List[Callable[..., None]]] = {event: [] for event in self.EVENTS}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def on(self, event: str, callback: Callable[..., None]) -> None:
        """Register a listener for "error" (called with the exception) or "end"."""
        if event not in self._listeners:
            raise ValueError(f"Unknown connection event: {event}")
        self._listeners[event].append(callback)

    def _emit(self, event: str, *args: Any) -> None:
        for callback in self._listeners[event]:
            try:
                callback(*args)
            except Exception as e:
                logger.debug(f"Connection {event} listener failed: {e}")

    async def query(self, sql: str, params: Params = None) -> List[Dict[str, Any]]:
        """
        Run one statement and return its rows as dicts.

        Statements without a result set return a single summary row
        with affectedRows and insertId.
        """
        try:
            async with self._raw.cursor(aiomysql.DictCursor) as cur:
                # Empty bindings go through as None so a literal % survives
                await cur.execute(escape_literal_percents(sql, params), params or None)
                if cur.description is None:
                    return [{"affectedRows": cur.rowcount, "insertId": cur.lastrowid}]
                return list(await cur.fetchall())
        except Exception as e:
            self._emit("error", e)
            raise

    async def close(self) -> None:
        """Send COM_QUIT and drop the socket. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        try:
            await self._raw.ensure_closed()
        finally:
            self._raw.close()
            self._emit("end")


async def create_connection(options: MySQLConnectOptions) -> MySQLConnection:
    """Open an autocommit aiomysql session."""
    raw = await aiomysql.connect(
        host=options.host or "localhost",
        port=options.port if options.port is not None else DEFAULT_PORT,
        user=options.user or "",
        password=options.password or "",
        db=options.database,
        connect_timeout=options.connect_timeout_ms / 1000,
        ssl=options.ssl_context(),
        autocommit=True,
    )
    return MySQLConnection(raw)
