"""
Test Configuration

Shared fixtures. The database driver is never contacted: plugins get a
fake connection factory that records every open, query and close.
"""

import pytest


class FakeConnection:
    """Stands in for MySQLConnection."""

    def __init__(self, rows=None):
        self.rows = rows if rows is not None else []
        self.query_error = None
        self.close_error = None
        self.queries = []
        self.listeners = {}
        self.close_calls = 0

    def on(self, event, callback):
        self.listeners.setdefault(event, []).append(callback)

    async def query(self, sql, params=None):
        self.queries.append((sql, params))
        if self.query_error is not None:
            raise self.query_error
        return self.rows

    async def close(self):
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error


class FakeConnectionFactory:
    """Records the options of every open and hands out one FakeConnection."""

    def __init__(self, connection):
        self.connection = connection
        self.error = None
        self.calls = []

    async def __call__(self, options):
        self.calls.append(options)
        if self.error is not None:
            raise self.error
        return self.connection


@pytest.fixture
def fake_connection():
    return FakeConnection()


@pytest.fixture
def connection_factory(fake_connection):
    return FakeConnectionFactory(fake_connection)


@pytest.fixture
def plugin(connection_factory):
    """MySQL plugin wired to the fake factory."""
    from plugins.mysql import MySQLPlugin

    return MySQLPlugin(connection_factory=connection_factory)


@pytest.fixture
def datasource_configuration():
    """Datasource configuration as the host sends it (camelCase)."""
    return {
        "endpoint": {"host": "db.internal", "port": 3306},
        "authentication": {
            "username": "app",
            "password": "secret",
            "custom": {"databaseName": {"value": "shop"}},
        },
        "connection": {"useSsl": False},
    }
