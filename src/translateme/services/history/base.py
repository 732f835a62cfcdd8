"""
History store abstraction.

A HistoryStore backend talks to one remote collection of translation
documents and raises StoreError when the store misbehaves. HistoryService
wraps a backend and turns every failure into an explicit result, so callers
never see an exception.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from translateme.errors import StoreError

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "translations"


@dataclass(frozen=True)
class TranslationRecord:
    """One persisted translation. Records are never modified once created."""

    original: str
    translated: str = ""
    id: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_document(
        cls,
        document_id: str,
        data: Mapping[str, Any] | None,
    ) -> "TranslationRecord":
        """
        Build a record from a raw store document.

        Missing or mistyped text fields become empty strings and an unusable
        timestamp becomes None; a malformed document never fails the read.
        """
        data = data or {}
        original = data.get("original")
        translated = data.get("translated")
        timestamp = data.get("timestamp")
        return cls(
            id=document_id,
            original=original if isinstance(original, str) else "",
            translated=translated if isinstance(translated, str) else "",
            created_at=timestamp if isinstance(timestamp, datetime) else None,
        )


@dataclass
class AppendResult:
    """Result of appending a record."""
    success: bool
    record_id: str | None = None
    error: str | None = None


@dataclass
class ListResult:
    """Result of listing the collection."""
    success: bool
    records: list[TranslationRecord] = field(default_factory=list)
    error: str | None = None


@dataclass
class DeleteResult:
    """Result of deleting one record."""
    success: bool
    record_id: str
    error: str | None = None


@dataclass
class DeleteReport:
    """Summary of an erase-all sweep."""
    attempted: int = 0
    failed: int = 0
    failed_ids: list[str] = field(default_factory=list)
    # Set when the collection could not be listed; nothing was deleted.
    error: str | None = None

    @property
    def deleted(self) -> int:
        return self.attempted - self.failed


@dataclass
class DeleteAllResult:
    """Result of an erase-all sweep."""
    success: bool
    report: DeleteReport = field(default_factory=DeleteReport)
    error: str | None = None


class HistoryStore(ABC):
    """Abstract base class for history store backends."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name for logging and identification."""
        pass

    @abstractmethod
    async def add(self, original: str, translated: str) -> str:
        """
        Create one document with a store-assigned id and timestamp.

        Returns:
            The new document id.

        Raises:
            StoreError: if the store rejects the write or is unreachable.
        """
        pass

    @abstractmethod
    async def list_documents(self) -> list[TranslationRecord]:
        """
        Return every document in the collection, in store order.

        Raises:
            StoreError: if the store is unreachable.
        """
        pass

    @abstractmethod
    async def delete(self, record_id: str) -> None:
        """
        Delete one document. Deleting a missing id is not an error.

        Raises:
            StoreError: if the store rejects the delete or is unreachable.
        """
        pass

    async def close(self) -> None:
        """Release connections held by the backend."""
        pass


class HistoryService:
    """
    History gateway over a store backend.

    Every operation returns a result object; backend failures are logged
    here and reported through the result's `error`.
    """

    def __init__(self, store: HistoryStore) -> None:
        self.store = store

    def _report_failure(self, operation: str, error: Exception) -> str:
        if isinstance(error, StoreError):
            logger.warning(f"History {operation} failed on {self.store.name}: {error}")
        else:
            logger.exception(
                f"Unexpected history {operation} error on {self.store.name}: {error}"
            )
        return str(error) or error.__class__.__name__

    async def append(self, original: str, translated: str) -> AppendResult:
        """Persist one translation."""
        try:
            record_id = await self.store.add(original, translated)
        except Exception as e:
            return AppendResult(success=False, error=self._report_failure("append", e))

        logger.debug(f"Saved translation {record_id} to {self.store.name}")
        return AppendResult(success=True, record_id=record_id)

    async def list_all(self) -> ListResult:
        """Fetch the whole collection. No ordering is requested."""
        try:
            records = await self.store.list_documents()
        except Exception as e:
            return ListResult(success=False, error=self._report_failure("list", e))

        return ListResult(success=True, records=list(records))

    async def delete_one(self, record_id: str) -> DeleteResult:
        """Delete one record by id; a missing id counts as success."""
        try:
            await self.store.delete(record_id)
        except Exception as e:
            return DeleteResult(
                success=False,
                record_id=record_id,
                error=self._report_failure("delete", e),
            )

        return DeleteResult(success=True, record_id=record_id)

    async def delete_all(self) -> DeleteAllResult:
        """
        Enumerate the collection, then delete each record independently.

        Deletions run concurrently and are not rolled back when some fail.
        Records created after the listing are not touched.
        """
        listing = await self.list_all()
        if not listing.success:
            return DeleteAllResult(
                success=False,
                report=DeleteReport(error=listing.error),
                error=listing.error,
            )

        record_ids = [record.id for record in listing.records if record.id]
        results = await asyncio.gather(
            *[self.delete_one(record_id) for record_id in record_ids]
        )

        failed_ids = [result.record_id for result in results if not result.success]
        report = DeleteReport(
            attempted=len(record_ids),
            failed=len(failed_ids),
            failed_ids=failed_ids,
        )

        logger.info(
            f"Erased history on {self.store.name}: "
            f"{report.deleted}/{report.attempted} deleted, {report.failed} failed"
        )
        return DeleteAllResult(success=True, report=report)

    async def close(self) -> None:
        await self.store.close()
