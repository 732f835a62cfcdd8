"""
SQL history store.

Keeps the translation collection in a relational table through SQLAlchemy's
async engine (SQLite + aiosqlite by default).
"""

import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from translateme.errors import StoreError
from translateme.models.base import create_session_factory, init_db, session_scope
from translateme.repositories.translation_repository import TranslationRepository
from translateme.services.history.base import HistoryStore, TranslationRecord

logger = logging.getLogger(__name__)


class SqlHistoryStore(HistoryStore):
    """
    History store backed by the `translations` table.

    Each operation runs in its own short session, so concurrent deletes of an
    erase-all sweep succeed or fail independently.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_factory = create_session_factory(engine)
        self._schema_ready = False
        self._schema_lock = asyncio.Lock()

    @property
    def name(self) -> str:
        return f"sql:{self.engine.url.drivername}"

    async def _ensure_schema(self) -> None:
        """Create the table on first use."""
        async with self._schema_lock:
            if not self._schema_ready:
                await init_db(self.engine)
                self._schema_ready = True

    async def add(self, original: str, translated: str) -> str:
        try:
            await self._ensure_schema()
            async with session_scope(self._session_factory) as session:
                document = await TranslationRepository(session).create_translation(
                    original=original,
                    translated=translated,
                )
                return document.id
        except SQLAlchemyError as e:
            raise StoreError(f"Database error: {e}") from e

    async def list_documents(self) -> list[TranslationRecord]:
        try:
            await self._ensure_schema()
            async with session_scope(self._session_factory) as session:
                documents = await TranslationRepository(session).get_all_translations()
        except SQLAlchemyError as e:
            raise StoreError(f"Database error: {e}") from e

        return [
            TranslationRecord.from_document(
                document.id,
                {
                    "original": document.original,
                    "translated": document.translated,
                    "timestamp": document.created_at,
                },
            )
            for document in documents
        ]

    async def delete(self, record_id: str) -> None:
        try:
            await self._ensure_schema()
            async with session_scope(self._session_factory) as session:
                deleted = await TranslationRepository(session).delete_translation(record_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Database error: {e}") from e

        if not deleted:
            logger.debug(f"Translation {record_id} was already gone")

    async def close(self) -> None:
        """Close database connections."""
        await self.engine.dispose()
