"""Tests for the SQLAlchemy-backed history store on a temporary SQLite file."""

import pytest

from translateme.errors import StoreError
from translateme.models import create_engine
from translateme.services.history import HistoryService
from translateme.services.history.sql import SqlHistoryStore


@pytest.fixture
async def sql_store(tmp_path):
    store = SqlHistoryStore(create_engine(f"sqlite+aiosqlite:///{tmp_path / 'history.db'}"))
    yield store
    await store.close()


class TestSqlHistoryStore:

    async def test_add_then_list(self, sql_store):
        record_id = await sql_store.add("hello", "hola")

        records = await sql_store.list_documents()

        assert len(records) == 1
        assert records[0].id == record_id
        assert records[0].original == "hello"
        assert records[0].translated == "hola"
        assert records[0].created_at is not None

    async def test_ids_are_opaque_hex_strings(self, sql_store):
        first = await sql_store.add("one", "uno")
        second = await sql_store.add("two", "dos")

        assert first != second
        assert len(first) == 32
        int(first, 16)

    async def test_unicode_round_trips(self, sql_store):
        await sql_store.add("good morning", "¡buenos días! 🌞")

        records = await sql_store.list_documents()

        assert records[0].translated == "¡buenos días! 🌞"

    async def test_delete_is_idempotent(self, sql_store):
        record_id = await sql_store.add("hello", "hola")

        await sql_store.delete(record_id)
        await sql_store.delete(record_id)

        assert await sql_store.list_documents() == []

    async def test_empty_store_lists_nothing(self, sql_store):
        assert await sql_store.list_documents() == []

    async def test_rows_written_together_list_in_insertion_order(self, sql_store):
        ids = [await sql_store.add(f"t{i}", f"T{i}") for i in range(5)]

        records = await sql_store.list_documents()

        assert [r.id for r in records] == ids
        assert all(r.created_at is not None for r in records)

    async def test_history_is_kept_across_store_instances(self, tmp_path):
        url = f"sqlite+aiosqlite:///{tmp_path / 'shared.db'}"
        writer = SqlHistoryStore(create_engine(url))
        await writer.add("hello", "hola")
        await writer.close()

        reader = SqlHistoryStore(create_engine(url))
        try:
            records = await reader.list_documents()
        finally:
            await reader.close()

        assert [(r.original, r.translated) for r in records] == [("hello", "hola")]

    async def test_unreachable_database_raises_store_error(self, tmp_path):
        store = SqlHistoryStore(
            create_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'history.db'}")
        )
        try:
            with pytest.raises(StoreError):
                await store.add("hello", "hola")
        finally:
            await store.close()


class TestSqlHistoryService:

    async def test_erase_all_sweeps_every_record(self, sql_store):
        history = HistoryService(sql_store)
        for i in range(3):
            await history.append(f"text {i}", f"texto {i}")

        result = await history.delete_all()

        assert result.success is True
        assert result.report.attempted == 3
        assert result.report.failed == 0
        assert (await history.list_all()).records == []

    async def test_unreachable_database_degrades_to_failed_results(self, tmp_path):
        history = HistoryService(
            SqlHistoryStore(
                create_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'history.db'}")
            )
        )
        try:
            append = await history.append("hello", "hola")
            listing = await history.list_all()
        finally:
            await history.close()

        assert append.success is False
        assert listing.success is False
        assert listing.records == []
