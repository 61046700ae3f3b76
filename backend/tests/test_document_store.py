"""
Catalog API — Document Store Tests
===================================

What:  Tests for DocumentStore against a real SQLite database (aiosqlite).
How:   The `store` fixture connects a fresh database per test; driver
       failures are simulated by patching AsyncSession.flush.

What we test:
    ✅ create() returns `_id` plus the validated document
    ✅ Repeated creates produce distinct ids; caller `_id` is ignored
    ✅ Rows land in the resource's own table
    ✅ Schema failures raise DocumentValidationError (a PersistenceError)
    ✅ Driver failures and timeouts raise StorageError (a PersistenceError)
    ✅ Lifecycle: connect/close idempotent, ping, not-connected errors
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from catalog_api.config import Settings
from catalog_api.database import DocumentStore
from catalog_api.exceptions import DocumentValidationError, PersistenceError, StorageError
from catalog_api.models.records import BookRecord, ProductRecord
from catalog_api.resources import BOOKS, PRODUCTS


class TestCreate:

    @pytest.mark.asyncio
    async def test_create_returns_record_with_id(self, store, book_payload):
        record = await store.create(BOOKS, book_payload)

        assert record["_id"]
        assert record["title"] == "Dune"
        assert record["author"] == "Frank Herbert"
        assert record["availability"]["isAvailable"] is True

    @pytest.mark.asyncio
    async def test_identical_creates_get_distinct_ids(self, store, book_payload):
        first = await store.create(BOOKS, book_payload)
        second = await store.create(BOOKS, book_payload)

        assert first["_id"] != second["_id"]

        async with store.session() as session:
            count = (await session.execute(select(func.count()).select_from(BookRecord))).scalar()
        assert count == 2

    @pytest.mark.asyncio
    async def test_caller_supplied_id_is_ignored(self, store, book_payload):
        book_payload["_id"] = "chosen-by-client"

        record = await store.create(BOOKS, book_payload)

        assert record["_id"] != "chosen-by-client"

    @pytest.mark.asyncio
    async def test_record_is_persisted_in_resource_table(self, store, product_payload):
        record = await store.create(PRODUCTS, product_payload)

        async with store.session() as session:
            row = await session.get(ProductRecord, record["_id"])

        assert row is not None
        assert row.document["supplier"]["name"] == "Inkworks"
        assert row.created_at is not None

    @pytest.mark.asyncio
    async def test_schema_failure_raises_validation_error(self, store):
        with pytest.raises(DocumentValidationError) as exc_info:
            await store.create(BOOKS, {"title": "Dune"})

        exc = exc_info.value
        assert isinstance(exc, PersistenceError)
        assert exc.message == "Book validation failed: author: Field required"
        assert exc.resource == "book"
        assert [error.path for error in exc.field_errors] == ["author"]

    @pytest.mark.asyncio
    async def test_failed_validation_writes_nothing(self, store):
        with pytest.raises(DocumentValidationError):
            await store.create(BOOKS, {})

        async with store.session() as session:
            count = (await session.execute(select(func.count()).select_from(BookRecord))).scalar()
        assert count == 0

    @pytest.mark.asyncio
    async def test_driver_failure_raises_storage_error(self, store, book_payload):
        failure = OperationalError("INSERT INTO books", {}, Exception("disk I/O error"))
        with patch(
            "sqlalchemy.ext.asyncio.AsyncSession.flush",
            new=AsyncMock(side_effect=failure),
        ):
            with pytest.raises(StorageError) as exc_info:
                await store.create(BOOKS, book_payload)

        assert exc_info.value.message == "Book could not be saved: OperationalError"
        assert exc_info.value.context["original_error"] == "OperationalError"

    @pytest.mark.asyncio
    async def test_driver_timeout_raises_storage_error(self, store, book_payload):
        with patch(
            "sqlalchemy.ext.asyncio.AsyncSession.flush",
            new=AsyncMock(side_effect=asyncio.TimeoutError()),
        ):
            with pytest.raises(StorageError) as exc_info:
                await store.create(BOOKS, book_payload)

        assert exc_info.value.message.startswith("Book could not be saved: ")
        assert "TimeoutError" in exc_info.value.message


class TestLifecycle:

    @pytest.mark.asyncio
    async def test_ping_when_connected(self, store):
        assert await store.ping() is True

    @pytest.mark.asyncio
    async def test_ping_when_not_connected(self):
        store = DocumentStore("sqlite+aiosqlite:///:memory:")
        assert await store.ping() is False

    @pytest.mark.asyncio
    async def test_create_before_connect_raises_storage_error(self, book_payload):
        store = DocumentStore("sqlite+aiosqlite:///:memory:")

        with pytest.raises(StorageError, match="not connected"):
            await store.create(BOOKS, book_payload)

    @pytest.mark.asyncio
    async def test_connect_and_close_are_idempotent(self, tmp_path):
        store = DocumentStore(f"sqlite+aiosqlite:///{tmp_path / 'lifecycle.db'}")

        await store.connect()
        engine = store.engine
        await store.connect()
        assert store.engine is engine

        await store.close()
        await store.close()
        assert not store.is_connected

    def test_engine_before_connect_raises(self):
        store = DocumentStore("sqlite+aiosqlite:///:memory:")
        with pytest.raises(StorageError):
            store.engine


class TestFromSettings:

    def test_sqlite_gets_no_pool_options(self):
        store = DocumentStore.from_settings(
            Settings(database_url="sqlite+aiosqlite:///./x.db", db_create_tables=False)
        )

        assert store.engine_options == {}
        assert store.create_tables is False

    def test_postgres_gets_pool_options(self):
        store = DocumentStore.from_settings(
            Settings(
                database_url="postgresql+asyncpg://u:p@db:5432/catalog",
                db_pool_size=7,
                db_max_overflow=3,
            )
        )

        assert store.engine_options["pool_size"] == 7
        assert store.engine_options["max_overflow"] == 3
        assert store.engine_options["pool_pre_ping"] is True

    def test_debug_level_enables_echo(self):
        store = DocumentStore.from_settings(
            Settings(database_url="sqlite+aiosqlite:///./x.db", log_level="debug")
        )
        assert store.echo is True
