"""
Translation repository for database operations.
"""

import logging
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from translateme.models.translation import TranslationDocument

logger = logging.getLogger(__name__)


class TranslationRepository:
    """
    Repository for TranslationDocument operations.

    Documents are create/delete only; there is no update operation.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_translation(
        self,
        original: str,
        translated: str,
    ) -> TranslationDocument:
        """Create a new translation document."""
        document = TranslationDocument(
            original=original,
            translated=translated,
        )
        self.session.add(document)
        await self.session.flush()
        await self.session.refresh(document)
        return document

    async def get_all_translations(self) -> Sequence[TranslationDocument]:
        """Get every translation document, in whatever order the database returns."""
        result = await self.session.execute(select(TranslationDocument))
        return result.scalars().all()

    async def delete_translation(self, document_id: str) -> bool:
        """Delete a translation document. Returns False if it did not exist."""
        result = await self.session.execute(
            delete(TranslationDocument).where(TranslationDocument.id == document_id)
        )
        return result.rowcount > 0
