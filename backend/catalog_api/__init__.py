"""
Catalog API — Application Package Initializer
==============================================

What: Marks the `catalog_api` directory as a Python package.
Who:  Imported by uvicorn (`catalog_api.main:app`), Alembic and pytest.

Architecture Note:
    The service follows the same layered layout for every resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Create / Placeholder) │  ← Request → store → response
    ├─────────────────────────────────────┤
    │    Schemas & Models (Documents)     │  ← Pydantic schemas + ORM tables
    ├─────────────────────────────────────┤
    │     DocumentStore (Persistence)     │  ← Async SQLAlchemy engine
    └─────────────────────────────────────┘

    Books, jobs and products share every layer; they differ only in the
    ResourceDefinition registered in `catalog_api.resources`.
"""

__version__ = "1.0.0"
