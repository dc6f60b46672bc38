"""
MySQL Plugin Package

- MySQLPlugin: execute / metadata / test against MySQL-compatible servers
- create_connection: default aiomysql connection factory
"""

from plugins.mysql.connection import MySQLConnectOptions, MySQLConnection, create_connection
from plugins.mysql.plugin import (
    MySQLPlugin,
    TABLE_QUERY,
    TEST_QUERY,
    TEST_CONNECTION_TIMEOUT_MS,
    fold_tables,
)

__all__ = [
    "MySQLPlugin",
    "MySQLConnectOptions",
    "MySQLConnection",
    "create_connection",
    "TABLE_QUERY",
    "TEST_QUERY",
    "TEST_CONNECTION_TIMEOUT_MS",
    "fold_tables",
]
