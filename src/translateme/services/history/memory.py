"""
In-memory history store.

Suitable for tests and throwaway sessions; nothing survives the process.
"""

import asyncio
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from translateme.services.history.base import (
    DEFAULT_COLLECTION,
    HistoryStore,
    TranslationRecord,
)


class MemoryHistoryStore(HistoryStore):
    """
    Insertion-ordered history store held in a dict.

    Timestamps are strictly increasing per store, mirroring a server clock.
    """

    def __init__(self, collection: str = DEFAULT_COLLECTION) -> None:
        self.collection = collection
        self._documents: dict[str, dict[str, Any]] = {}
        self._last_timestamp: datetime | None = None
        self._lock = asyncio.Lock()

    @property
    def name(self) -> str:
        return f"memory:{self.collection}"

    def _next_timestamp(self) -> datetime:
        now = datetime.now(timezone.utc)
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    async def add(self, original: str, translated: str) -> str:
        async with self._lock:
            document_id = uuid.uuid4().hex
            self._documents[document_id] = {
                "original": original,
                "translated": translated,
                "timestamp": self._next_timestamp(),
            }
            return document_id

    async def list_documents(self) -> list[TranslationRecord]:
        async with self._lock:
            return [
                TranslationRecord.from_document(document_id, data)
                for document_id, data in self._documents.items()
            ]

    async def delete(self, record_id: str) -> None:
        async with self._lock:
            self._documents.pop(record_id, None)

    def size(self) -> int:
        """Return current number of documents."""
        return len(self._documents)
