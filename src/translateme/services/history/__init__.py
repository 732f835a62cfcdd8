"""
History store services.

Provides abstraction for the remote collection holding translation history.
"""

from translateme.services.history.base import (
    AppendResult,
    DeleteAllResult,
    DeleteReport,
    DeleteResult,
    HistoryService,
    HistoryStore,
    ListResult,
    TranslationRecord,
)
from translateme.services.history.memory import MemoryHistoryStore

__all__ = [
    "AppendResult",
    "DeleteAllResult",
    "DeleteReport",
    "DeleteResult",
    "HistoryService",
    "HistoryStore",
    "ListResult",
    "MemoryHistoryStore",
    "TranslationRecord",
]
