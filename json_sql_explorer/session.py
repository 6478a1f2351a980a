"""Per-user query session.

A session owns exactly one dataset, one current result, one history ledger and
the editable query buffer. Loading new data replaces the dataset and resets the
result and history in one step.
"""
from __future__ import annotations

import threading
from typing import Any, Callable, List, Optional, Sequence

from . import engine
from .errors import ParseError, QueryToolError, ValidationError
from .history import HistoryEntry, HistoryLedger
from .log_utils import get_logger
from .records import Dataset, preview_records, resolve_alias
from .results import QueryResult, error_result, normalize_result
from .rewriter import rewrite
from .samples import sample_text

logger = get_logger(__name__)

Executor = Callable[[str, Sequence[Any]], Any]


class QuerySession:

    def __init__(self, executor: Optional[Executor] = None):
        self.executor: Executor = executor or engine.execute
        self.dataset = Dataset()
        self.result: Optional[QueryResult] = None
        self.history = HistoryLedger()
        self.query_text = ''
        self._lock = threading.Lock()

    # --- loading ---

    def load_dataset(self, text: str, alias: Optional[str] = None) -> Dataset:
        """Parse `text` and swap it in as the current dataset.

        On success the result and history are reset along with the dataset. On
        a parse error only the result changes, to carry the error.
        """
        with self._lock:
            try:
                dataset = Dataset.from_text(text, alias if alias is not None else self.dataset.alias)
            except ParseError as exc:
                logger.warning("Rejected JSON input: %s", exc.message)
                self.result = error_result(exc)
                raise

            self.dataset = dataset
            self.result = None
            self.history = HistoryLedger()
            logger.info("Loaded %d records as '%s'", len(dataset), dataset.alias)
            return dataset

    def load_sample(self, name: str) -> Dataset:
        return self.load_dataset(sample_text(name), alias=name)

    def unload(self) -> None:
        """Drop the dataset and result; history is kept."""
        with self._lock:
            self.dataset = Dataset(alias=self.dataset.alias)
            self.result = None

    def set_alias(self, alias: Optional[str]) -> str:
        with self._lock:
            self.dataset = Dataset(records=self.dataset.records, alias=resolve_alias(alias))
            return self.dataset.alias

    # --- querying ---

    def execute(self, query_text: Optional[str] = None) -> QueryResult:
        with self._lock:
            if query_text is not None:
                self.query_text = query_text
            self.result = self._run(self.query_text)
            return self.result

    def _run(self, query_text: str) -> QueryResult:
        try:
            self._validate(query_text)
            sql, params = rewrite(query_text, self.dataset.alias, self.dataset.records)
            logger.debug("Rewrote query: %s", sql)
            output = self.executor(sql, params)
        except QueryToolError as exc:
            logger.info("Query failed (%s): %s", exc.kind, exc.message)
            return error_result(exc)

        result = normalize_result(output)
        self.history.record(query_text)
        logger.info("Query returned %d rows", len(result.rows))
        return result

    def _validate(self, query_text: str) -> None:
        if not query_text or not query_text.strip():
            raise ValidationError("Please enter a SQL query")
        if self.dataset.is_empty:
            raise ValidationError("Please load JSON data first")

    def clear_query(self) -> None:
        with self._lock:
            self.query_text = ''
            self.result = None

    # --- history ---

    def use_history(self, entry_id: str) -> str:
        """Copy a past query back into the buffer without running it."""
        with self._lock:
            entry = self.history.get(entry_id)
            if entry is None:
                raise KeyError(f"No history entry with id {entry_id}")
            self.query_text = entry.query_text
            return self.query_text

    def clear_history(self) -> None:
        with self._lock:
            self.history.clear()

    def history_entries(self) -> List[HistoryEntry]:
        return self.history.entries()

    def preview(self):
        return preview_records(self.dataset.records)
