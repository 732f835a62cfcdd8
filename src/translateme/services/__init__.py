"""
Service layer: translation provider and history store gateways.
"""

from translateme.services.history import (
    DeleteReport,
    HistoryService,
    HistoryStore,
    MemoryHistoryStore,
    TranslationRecord,
)
from translateme.services.history.factory import (
    create_history_service,
    create_history_store,
)
from translateme.services.translation import (
    MyMemoryProvider,
    TranslationProvider,
    TranslationResult,
)
from translateme.services.sync_client import (
    TRANSLATION_FAILED,
    AttemptState,
    HistoryView,
    TranslationOutcome,
    TranslationSyncClient,
    create_sync_client,
)
from translateme.services.translation.factory import create_translation_provider

__all__ = [
    # Sync client
    "TRANSLATION_FAILED",
    "AttemptState",
    "HistoryView",
    "TranslationOutcome",
    "TranslationSyncClient",
    "create_sync_client",
    # History
    "DeleteReport",
    "HistoryService",
    "HistoryStore",
    "MemoryHistoryStore",
    "TranslationRecord",
    "create_history_service",
    "create_history_store",
    # Translation
    "MyMemoryProvider",
    "TranslationProvider",
    "TranslationResult",
    "create_translation_provider",
]
