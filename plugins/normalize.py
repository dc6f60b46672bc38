"""
Result normalization shared by all datasource plugins.

Every plugin passes its row set through `normalize_table_column_names`
before returning it, so column names look the same whichever database
produced them.
"""

from typing import Any, Dict, Iterable, List, Mapping


def normalize_column_name(name: Any) -> str:
    """Canonical form of a single column name: text, no surrounding whitespace."""
    return str(name).strip()


def normalize_table_column_names(rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Normalize the column names of every row.

    Key order and values are preserved. A row that is not a mapping
    raises TypeError.
    """
    normalized = []
    for row in rows:
        if not isinstance(row, Mapping):
            raise TypeError(f"Expected a row mapping, got {type(row).__name__}")
        normalized.append({normalize_column_name(key): value for key, value in row.items()})
    return normalized
