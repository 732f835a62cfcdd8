"""
History store factory.

Creates the configured history store backend.
"""

import logging

from translateme.config import Settings, get_settings
from translateme.models.base import create_engine
from translateme.services.history.base import HistoryService, HistoryStore
from translateme.services.history.memory import MemoryHistoryStore
from translateme.services.history.sql import SqlHistoryStore

logger = logging.getLogger(__name__)


def create_history_store(settings: Settings | None = None) -> HistoryStore:
    """
    Create a history store based on settings.

    Returns:
        HistoryStore instance for the configured backend.
    """
    settings = settings or get_settings()
    backend = settings.history_backend

    if backend == "memory":
        logger.info("Using in-memory history store (history is not persisted)")
        return MemoryHistoryStore(collection=settings.history_collection)

    if backend == "firestore":
        # Import here to avoid loading google-cloud-firestore if not needed
        from translateme.services.history.firestore import FirestoreHistoryStore

        logger.info(f"Using Firestore history store, collection '{settings.history_collection}'")
        return FirestoreHistoryStore(
            collection=settings.history_collection,
            project_id=settings.firestore_project_id,
            credentials_path=settings.google_credentials_path,
        )

    logger.info(f"Using SQL history store at {settings.database_url}")
    return SqlHistoryStore(
        create_engine(
            settings.database_url,
            echo=settings.log_level == "DEBUG",
        )
    )


def create_history_service(settings: Settings | None = None) -> HistoryService:
    """Create a history service over the configured store."""
    return HistoryService(create_history_store(settings))
