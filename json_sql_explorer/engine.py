from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Sequence

import duckdb
import pandas as pd

from .errors import EngineError
from .log_utils import get_logger

logger = get_logger(__name__)


def placeholder(index: int) -> str:
    """Relation name that parameter `index` is bound to."""
    return f"__param_{index}__"


FILLER_COLUMN = "__no_columns__"


def records_to_frame(records: Sequence[Any]) -> pd.DataFrame:
    """Build an object-dtype DataFrame whose columns are the union of all record keys.

    Records that are not mappings are exposed through a single `value` column.
    Cells missing from a record are None, so values keep their JSON types. When
    no record has any key, a filler column keeps one row per record.

    DuckDB unifies each column to one type: a column mixing numbers and strings
    comes back as strings, and so do struct members that mix types.
    """
    rows = [dict(r) if isinstance(r, Mapping) else {'value': r} for r in records]
    columns = list(dict.fromkeys(key for row in rows for key in row))
    if not columns:
        return pd.DataFrame({FILLER_COLUMN: [0] * len(rows)}, dtype=object)
    return pd.DataFrame({c: [row.get(c) for row in rows] for c in columns}, dtype=object)


def execute(sql: str, params: Sequence[Sequence[Any]]) -> List[Dict[str, Any]]:
    """Run `sql` on a fresh in-memory DuckDB connection.

    Each parameter is registered as the relation named by `placeholder(i)`.
    DuckDB failures are re-raised as EngineError with DuckDB's own message.
    """
    with duckdb.connect(database=":memory:") as conn:
        try:
            for idx, records in enumerate(params):
                conn.register(placeholder(idx), records_to_frame(records))
            cursor = conn.execute(sql)
            if cursor.description is None:
                return []
            columns = [col[0] for col in cursor.description]
            fetched = cursor.fetchall()
        except duckdb.Error as exc:
            logger.warning("Engine rejected query: %s", exc)
            raise EngineError(str(exc)) from exc

    return [
        {col: value for col, value in zip(columns, row) if col != FILLER_COLUMN}
        for row in fetched
    ]
