"""
Catalog API — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── store:          DocumentStore on a fresh SQLite file, connected
    ├── mock_store:     AsyncMock standing in for DocumentStore.create
    ├── test_client:    HTTPX AsyncClient talking to create_app(store=store)
    └── *_payload:      Valid request bodies for books, jobs and products
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Set BEFORE any catalog_api import: settings are read at import time and
# catalog_api.main builds a module-level app from them.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_catalog.db"
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Store Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def store(tmp_path):
    """
    A connected DocumentStore backed by a throwaway SQLite database.

    Tables are created on connect; the file disappears with tmp_path.
    """
    from catalog_api.database import DocumentStore

    document_store = DocumentStore(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await document_store.connect()
    yield document_store
    await document_store.close()


@pytest.fixture
def mock_store():
    """
    DocumentStore double for handler tests.

    Usage:
        mock_store.create.return_value = {"_id": "abc", "title": "Dune"}
        mock_store.create.side_effect = DocumentValidationError("...")
    """
    document_store = MagicMock()
    document_store.create = AsyncMock()
    document_store.ping = AsyncMock(return_value=True)
    return document_store


@pytest_asyncio.fixture
async def test_client(store):
    """
    HTTPX AsyncClient wired to an app built around the `store` fixture.

    ASGITransport does not run the lifespan; the store fixture has
    already connected.
    """
    from catalog_api.main import create_app

    app = create_app(store=store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Payload Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def book_payload():
    return {
        "title": "Dune",
        "author": "Frank Herbert",
        "isbn": "978-0441013593",
        "genre": "Science Fiction",
    }


@pytest.fixture
def job_payload():
    return {
        "title": "Backend Developer",
        "type": "Full-Time",
        "description": "Build and run the catalog services.",
        "company": {
            "name": "Acme Corp",
            "contactEmail": "jobs@acme.test",
            "contactPhone": "555-0100",
        },
    }


@pytest.fixture
def product_payload():
    return {
        "title": "Pen",
        "category": "Stationery",
        "description": "Blue ballpoint pen",
        "price": 1.5,
        "stockQuantity": 200,
        "supplier": {
            "name": "Inkworks",
            "contactEmail": "sales@inkworks.test",
            "contactPhone": "555-0199",
            "rating": 4.5,
        },
    }
