from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from . import config
from .io_utils import normalize_records


@dataclass(frozen=True)
class Dataset:
    """Loaded records plus the alias SQL uses to refer to them."""

    records: List[Any] = field(default_factory=list)
    alias: str = config.DEFAULT_ALIAS

    @classmethod
    def from_text(cls, text: str, alias: str | None = None) -> 'Dataset':
        return cls(records=normalize_records(text), alias=resolve_alias(alias))

    @property
    def is_empty(self) -> bool:
        return not self.records

    def __len__(self) -> int:
        return len(self.records)


def resolve_alias(alias: str | None) -> str:
    alias = (alias or '').strip()
    return alias or config.DEFAULT_ALIAS


def extract_columns(records: List[Any]) -> List[str]:
    """Union of top-level keys across records, in first-seen order."""
    columns: Dict[str, None] = {}
    for record in records:
        if isinstance(record, dict):
            for key in record:
                columns.setdefault(str(key), None)
    return list(columns)


def preview_records(records: List[Any], limit: int = config.PREVIEW_ROWS):
    """Headers and rows for a preview table.

    Headers come from the first record only; later records may carry keys the
    preview does not show.
    """
    if not records:
        return [], []

    first = records[0]
    if isinstance(first, dict):
        headers = [str(k) for k in first]
    else:
        headers = ['value']

    rows: List[List[Any]] = []
    for record in records[:max(1, int(limit))]:
        if isinstance(record, dict):
            rows.append([format_cell(record.get(h)) for h in headers])
        else:
            rows.append([format_cell(record)])
    return headers, rows


def format_cell(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, (dict, list)):
        try:
            return json.dumps(value, ensure_ascii=False)
        except TypeError:
            return str(value)
    return str(value)


def compute_document_count_text(dataset: Dataset | None) -> str:
    if dataset is None or dataset.is_empty:
        return ""
    columns = extract_columns(dataset.records)
    return f"Rows: {len(dataset)} | Columns: {len(columns)} | Table alias: {dataset.alias}"


def jsonable_rows(rows: List[Any]) -> List[Any]:
    """Rows with values the JSON view can render (dates, decimals become strings)."""
    return json.loads(json.dumps(rows, default=str, ensure_ascii=False))


def rows_to_table(rows: List[Any]) -> Tuple[List[str], List[List[str]]]:
    """Headers and cells for a result table, keyed on every column seen."""
    headers = extract_columns(rows)
    if not headers and any(not isinstance(r, dict) for r in rows):
        headers = ['value']
    table: List[List[str]] = []
    for row in rows:
        if isinstance(row, dict):
            table.append([format_cell(row.get(h)) for h in headers])
        else:
            table.append([format_cell(row)])
    return headers, table
