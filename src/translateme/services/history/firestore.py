"""
Google Cloud Firestore history store.

Documents live in one top-level collection with fields `original`,
`translated` and a server-set `timestamp`.

Requires the optional dependency:
    pip install 'translateme[firestore]'
"""

import inspect
import logging
import os
from typing import Any

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import firestore

from translateme.errors import StoreError
from translateme.services.history.base import (
    DEFAULT_COLLECTION,
    HistoryStore,
    TranslationRecord,
)

logger = logging.getLogger(__name__)

FIRESTORE_ERRORS = (GoogleAPIError, GoogleAuthError)


class FirestoreHistoryStore(HistoryStore):
    """History store backed by a Firestore collection."""

    def __init__(
        self,
        collection: str = DEFAULT_COLLECTION,
        project_id: str | None = None,
        credentials_path: str | None = None,
        client: Any = None,
    ) -> None:
        self.collection = collection
        self.project_id = project_id
        self.credentials_path = credentials_path
        self._client = client

    @property
    def name(self) -> str:
        return f"firestore:{self.collection}"

    def _get_client(self) -> Any:
        """Lazy initialization of the Firestore client."""
        if self._client is None:
            if self.credentials_path:
                os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = self.credentials_path
            try:
                self._client = firestore.AsyncClient(project=self.project_id)
            except FIRESTORE_ERRORS as e:
                raise StoreError(f"Firestore client unavailable: {e}") from e
        return self._client

    def _collection(self) -> Any:
        return self._get_client().collection(self.collection)

    async def add(self, original: str, translated: str) -> str:
        try:
            _, document_ref = await self._collection().add(
                {
                    "original": original,
                    "translated": translated,
                    "timestamp": firestore.SERVER_TIMESTAMP,
                }
            )
        except FIRESTORE_ERRORS as e:
            raise StoreError(f"Error saving translation: {e}") from e
        return document_ref.id

    async def list_documents(self) -> list[TranslationRecord]:
        records = []
        try:
            async for snapshot in self._collection().stream():
                records.append(
                    TranslationRecord.from_document(snapshot.id, snapshot.to_dict())
                )
        except FIRESTORE_ERRORS as e:
            raise StoreError(f"Error fetching documents: {e}") from e
        return records

    async def delete(self, record_id: str) -> None:
        try:
            await self._collection().document(record_id).delete()
        except FIRESTORE_ERRORS as e:
            raise StoreError(f"Error deleting document: {e}") from e

    async def close(self) -> None:
        """Close the Firestore client; a new one is created on next use."""
        if self._client is None:
            return
        client, self._client = self._client, None
        result = client.close()
        if inspect.isawaitable(result):
            await result
