"""
Exception Hierarchy Tests

Run: pytest tests/test_exceptions.py -v
"""

import pytest

from plugins.exceptions import (
    ConnectionFailedError,
    DatasourceConfigurationError,
    IntegrationError,
    QueryFailedError,
    TestConnectionFailedError as ConnectionCheckFailedError,
)
from utils.exceptions import PluginError


class TestIntegrationErrors:

    @pytest.mark.parametrize("error, message, status_code", [
        (ConnectionFailedError("MySQL", "ETIMEDOUT"), "Failed to connect to MySQL, ETIMEDOUT", 502),
        (QueryFailedError("MySQL", "syntax error"), "MySQL query failed, syntax error", 500),
        (ConnectionCheckFailedError("MySQL", "ECONNREFUSED"), "Test MySQL connection failed, ECONNREFUSED", 502),
        (DatasourceConfigurationError("MySQL", "database"), "Database not specified for MySQL step", 400),
    ])
    def test_messages(self, error, message, status_code):
        assert isinstance(error, IntegrationError)
        assert isinstance(error, PluginError)
        assert str(error) == message
        assert error.status_code == status_code
        assert error.details["plugin"] == "MySQL"

    def test_unknown_configuration_field(self):
        error = DatasourceConfigurationError("MySQL", "port")

        assert error.message == "port not specified for MySQL step"

    def test_to_dict(self):
        error = QueryFailedError("MySQL", "boom")

        assert error.to_dict() == {
            "error": "QueryFailedError",
            "message": "MySQL query failed, boom",
            "details": {"plugin": "MySQL"},
        }
