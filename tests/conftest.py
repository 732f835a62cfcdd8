"""Shared fixtures: stub provider, in-memory history and a fake MyMemory server."""

import asyncio
import json
from typing import Any

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from translateme.errors import StoreError
from translateme.services.history import HistoryService, MemoryHistoryStore
from translateme.services.sync_client import TranslationSyncClient
from translateme.services.translation import (
    MyMemoryProvider,
    TranslationProvider,
    TranslationResult,
)


class StubProvider(TranslationProvider):
    """Provider returning canned results keyed by input text."""

    def __init__(self, translations: dict[str, str] | None = None) -> None:
        self.translations = translations or {}
        self.calls: list[tuple[str, str, str]] = []
        self.closed = False

    @property
    def name(self) -> str:
        return "stub"

    async def translate(self, text: str, target_lang: str, source_lang: str) -> TranslationResult:
        self.calls.append((text, target_lang, source_lang))
        if text in self.translations:
            return TranslationResult(success=True, translated_text=self.translations[text])
        return TranslationResult.failure("Invalid response data: missing responseData")

    async def close(self) -> None:
        self.closed = True


class RecordingStore(MemoryHistoryStore):
    """Memory store that counts deletes and can be told to fail."""

    def __init__(self) -> None:
        super().__init__()
        self.delete_calls: list[str] = []
        self.failing_ids: set[str] = set()
        self.fail_add = False
        self.fail_list = False

    async def add(self, original: str, translated: str) -> str:
        if self.fail_add:
            raise StoreError("store unavailable")
        return await super().add(original, translated)

    async def list_documents(self):
        if self.fail_list:
            raise StoreError("store unavailable")
        return await super().list_documents()

    async def delete(self, record_id: str) -> None:
        self.delete_calls.append(record_id)
        if record_id in self.failing_ids:
            raise StoreError(f"could not delete {record_id}")
        await super().delete(record_id)


class FakeMyMemory:
    """A local HTTP server speaking just enough of the MyMemory API."""

    def __init__(self) -> None:
        self.status = 200
        self.body = json.dumps({"responseData": {"translatedText": "hola"}})
        self.delay = 0.0
        self.requests: list[dict[str, str]] = []
        self.server: TestServer | None = None

    def respond(self, payload: Any = None, status: int = 200, raw: str | None = None) -> None:
        self.status = status
        self.body = raw if raw is not None else json.dumps(payload)

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append(dict(request.query))
        if self.delay:
            await asyncio.sleep(self.delay)
        return web.Response(
            status=self.status,
            text=self.body,
            content_type="application/json",
        )

    @property
    def base_url(self) -> str:
        return str(self.server.make_url("/")).rstrip("/")


@pytest.fixture
async def mymemory():
    fake = FakeMyMemory()
    app = web.Application()
    app.router.add_get("/get", fake.handle)
    fake.server = TestServer(app)
    await fake.server.start_server()
    yield fake
    await fake.server.close()


@pytest.fixture
async def provider(mymemory):
    provider = MyMemoryProvider(base_url=mymemory.base_url)
    yield provider
    await provider.close()


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def history(store) -> HistoryService:
    return HistoryService(store)


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider({"hello": "hola", "goodbye": "adiós"})


@pytest.fixture
def client(stub_provider, history) -> TranslationSyncClient:
    return TranslationSyncClient(stub_provider, history, source_lang="en", target_lang="es")
