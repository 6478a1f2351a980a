from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .errors import QueryToolError


@dataclass(frozen=True)
class QueryResult:
    """Either rows or an error message, never both."""

    rows: List[Any] = field(default_factory=list)
    error: Optional[str] = None
    kind: Optional[str] = None

    def __post_init__(self):
        if self.error is not None and self.rows:
            raise ValueError("QueryResult cannot carry both rows and an error")

    @property
    def ok(self) -> bool:
        return self.error is None


def normalize_result(output: Any) -> QueryResult:
    """Wrap engine output as rows; a single non-sequence value becomes one row."""
    if isinstance(output, (list, tuple)):
        return QueryResult(rows=list(output))
    return QueryResult(rows=[output])


def error_result(exc: QueryToolError) -> QueryResult:
    return QueryResult(error=exc.message, kind=exc.kind)
