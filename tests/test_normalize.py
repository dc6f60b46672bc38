"""
Column Name Normalization Tests

Run: pytest tests/test_normalize.py -v
"""

import pytest

from plugins.normalize import normalize_column_name, normalize_table_column_names


class TestNormalizeColumnNames:

    def test_strips_whitespace_and_keeps_order(self):
        rows = [{" id": 1, "email ": "a@example.com", "created_at": None}]

        result = normalize_table_column_names(rows)

        assert result == [{"id": 1, "email": "a@example.com", "created_at": None}]
        assert list(result[0]) == ["id", "email", "created_at"]

    def test_values_untouched(self):
        payload = {"nested": [1, 2]}

        result = normalize_table_column_names([{"doc": payload}])

        assert result[0]["doc"] is payload

    def test_non_string_keys(self):
        assert normalize_column_name(1) == "1"

    def test_empty(self):
        assert normalize_table_column_names([]) == []

    def test_accepts_tuples_of_rows(self):
        assert normalize_table_column_names(({"a": 1}, {"a": 2})) == [{"a": 1}, {"a": 2}]

    def test_rejects_non_mapping_rows(self):
        with pytest.raises(TypeError):
            normalize_table_column_names([(1, 2)])
