"""
Translation document model for the SQL history store.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from translateme.models.base import Base


def generate_document_id() -> str:
    """Opaque store-assigned id."""
    return uuid.uuid4().hex


class TranslationDocument(Base):
    """
    One persisted translation.

    Rows are written once and never updated; the `timestamp` column is filled
    in by the database at insert time. On SQLite it has one-second
    resolution, so rows written in the same second share a timestamp; list
    order there comes from the rowid scan, not from this column.
    """

    __tablename__ = "translations"

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=generate_document_id,
    )
    original: Mapped[str | None] = mapped_column(Text)
    translated: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime | None] = mapped_column(
        "timestamp",
        DateTime(timezone=True),
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        original = (self.original or "")[:30]
        return f"<TranslationDocument(id={self.id}, original='{original}')>"
