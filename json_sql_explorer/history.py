from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    query_text: str
    timestamp: datetime

    def display_time(self) -> str:
        return self.timestamp.astimezone().strftime('%H:%M:%S')


class HistoryLedger:
    """Newest-first log of successfully executed queries."""

    def __init__(self):
        self._entries: List[HistoryEntry] = []

    def record(self, query_text: str) -> HistoryEntry:
        entry = HistoryEntry(
            id=uuid4().hex,
            query_text=query_text,
            timestamp=datetime.now(timezone.utc),
        )
        self._entries.insert(0, entry)
        return entry

    def clear(self) -> None:
        self._entries = []

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._entries)
