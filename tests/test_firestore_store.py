"""Tests for the Firestore history store using an in-process fake client."""

import uuid

import pytest

firestore = pytest.importorskip("google.cloud.firestore")

from google.api_core.exceptions import ServiceUnavailable  # noqa: E402

from translateme.errors import StoreError  # noqa: E402
from translateme.services.history import HistoryService  # noqa: E402
from translateme.services.history.firestore import FirestoreHistoryStore  # noqa: E402


class FakeSnapshot:
    def __init__(self, document_id, data):
        self.id = document_id
        self._data = data

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocumentRef:
    def __init__(self, collection, document_id):
        self._collection = collection
        self.id = document_id

    async def delete(self):
        if self.id in self._collection.failing_ids:
            raise ServiceUnavailable("firestore is down")
        self._collection.documents.pop(self.id, None)


class FakeCollection:
    def __init__(self):
        self.documents: dict[str, dict] = {}
        self.failing_ids: set[str] = set()
        self.unavailable = False

    async def add(self, data):
        if self.unavailable:
            raise ServiceUnavailable("firestore is down")
        document_id = uuid.uuid4().hex[:20]
        self.documents[document_id] = data
        return None, FakeDocumentRef(self, document_id)

    async def stream(self):
        if self.unavailable:
            raise ServiceUnavailable("firestore is down")
        for document_id, data in list(self.documents.items()):
            yield FakeSnapshot(document_id, data)

    def document(self, document_id):
        return FakeDocumentRef(self, document_id)


class FakeClient:
    def __init__(self):
        self.collections: dict[str, FakeCollection] = {}
        self.closed = False

    def collection(self, name):
        return self.collections.setdefault(name, FakeCollection())

    def close(self):
        self.closed = True


class AwaitableCloseClient(FakeClient):
    async def close(self):
        self.closed = True


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def firestore_store(fake_client):
    return FirestoreHistoryStore(collection="translations", client=fake_client)


class TestFirestoreHistoryStore:

    async def test_add_writes_fields_and_server_timestamp(self, firestore_store, fake_client):
        record_id = await firestore_store.add("hello", "hola")

        document = fake_client.collection("translations").documents[record_id]
        assert document["original"] == "hello"
        assert document["translated"] == "hola"
        assert document["timestamp"] is firestore.SERVER_TIMESTAMP

    async def test_list_maps_snapshots_to_records(self, firestore_store):
        record_id = await firestore_store.add("hello", "hola")

        records = await firestore_store.list_documents()

        assert [(r.id, r.original, r.translated) for r in records] == [(record_id, "hello", "hola")]

    async def test_malformed_documents_are_defaulted(self, firestore_store, fake_client):
        fake_client.collection("translations").documents["odd"] = {"original": None}

        records = await firestore_store.list_documents()

        assert records[0].id == "odd"
        assert records[0].original == ""
        assert records[0].translated == ""

    async def test_uses_configured_collection(self, fake_client):
        store = FirestoreHistoryStore(collection="scratch", client=fake_client)

        await store.add("hello", "hola")

        assert len(fake_client.collection("scratch").documents) == 1
        assert len(fake_client.collection("translations").documents) == 0

    async def test_delete_missing_document_is_fine(self, firestore_store):
        await firestore_store.delete("never-existed")

    async def test_api_errors_become_store_errors(self, firestore_store, fake_client):
        fake_client.collection("translations").unavailable = True

        with pytest.raises(StoreError):
            await firestore_store.add("hello", "hola")
        with pytest.raises(StoreError):
            await firestore_store.list_documents()

    async def test_erase_all_reports_failed_deletes(self, firestore_store, fake_client):
        history = HistoryService(firestore_store)
        ids = [(await history.append(t, t.upper())).record_id for t in ["a", "b", "c"]]
        fake_client.collection("translations").failing_ids = {ids[0]}

        result = await history.delete_all()

        assert result.report.attempted == 3
        assert result.report.failed_ids == [ids[0]]
        assert list(fake_client.collection("translations").documents) == [ids[0]]

    async def test_close_closes_client(self, firestore_store, fake_client):
        await firestore_store.close()

        assert fake_client.closed

    async def test_close_awaits_async_client_close(self):
        client = AwaitableCloseClient()
        store = FirestoreHistoryStore(client=client)

        await store.close()
        await store.close()

        assert client.closed
