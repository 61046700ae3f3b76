"""
Catalog API — Document Store
=============================

What:  Async SQLAlchemy engine, session management and the single write
       capability the create handlers consume: `create(resource, fields)`.
How:   A DocumentStore instance is built by the application factory,
       connected during lifespan startup and disposed on shutdown. Nothing
       in this module opens a connection at import time.
Who:   Injected into every ResourceCreateHandler and the health route.

Write path (create):
    fields ──▶ validate_document() ──▶ ORM row (id, document JSON) ──▶ flush/commit
                    │ failure                              │ SQLAlchemyError
                    ▼                                      ▼
          DocumentValidationError                     StorageError
                    └──────────── both are PersistenceError ─────┘

Connection Pooling:
    Postgres (asyncpg) uses the pool settings from config. SQLite (aiosqlite,
    used by the tests) gets the driver defaults because the SQLite pools
    reject pool_size/max_overflow.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncGenerator, Dict, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from catalog_api.config import Settings
from catalog_api.exceptions import DocumentValidationError, StorageError
from catalog_api.services.validation import validate_document

if TYPE_CHECKING:
    from catalog_api.resources import ResourceDefinition

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object between the store (create_all) and Alembic.
    """
    pass


class DocumentStore:
    """
    Explicitly constructed persistence client.

    Lifecycle:
        store = DocumentStore.from_settings(settings)
        await store.connect()      # lifespan startup
        await store.create(...)    # per request
        await store.close()        # lifespan shutdown
    """

    def __init__(
        self,
        database_url: str,
        *,
        echo: bool = False,
        create_tables: bool = True,
        engine_options: Optional[Dict[str, Any]] = None,
    ):
        self.database_url = database_url
        self.echo = echo
        self.create_tables = create_tables
        self.engine_options = engine_options or {}
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentStore":
        engine_options: Dict[str, Any] = {}
        if not settings.is_sqlite:
            engine_options = {
                "pool_size": settings.db_pool_size,
                "max_overflow": settings.db_max_overflow,
                "pool_pre_ping": settings.db_pool_pre_ping,
                "pool_recycle": 3600,
            }
        return cls(
            settings.database_url,
            echo=settings.log_level == "DEBUG",
            create_tables=settings.db_create_tables,
            engine_options=engine_options,
        )

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise StorageError(message="Document store is not connected")
        return self._engine

    # ── Lifecycle ─────────────────────────────────────────────────────────
    async def connect(self) -> None:
        """
        Create the engine and session factory; optionally create tables.

        Idempotent: a second call on a connected store does nothing.
        """
        if self._engine is not None:
            return

        # Registers the record tables on Base.metadata
        from catalog_api.models import records  # noqa: F401

        self._engine = create_async_engine(
            self.database_url,
            echo=self.echo,
            **self.engine_options,
        )
        # expire_on_commit=False: rows stay readable after the session commits
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        if self.create_tables:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

        logger.info(
            "Document store connected (%s)",
            self._engine.url.render_as_string(hide_password=True),
        )

    async def close(self) -> None:
        """Dispose the engine and return every pooled connection."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Document store closed")

    # ── Sessions ──────────────────────────────────────────────────────────
    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Unit of work: commit on success, roll back on any error, always close.
        """
        if self._session_factory is None:
            raise StorageError(message="Document store is not connected")

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    # ── Operations ────────────────────────────────────────────────────────
    async def create(
        self,
        resource: "ResourceDefinition",
        fields: Mapping[str, Any],
    ) -> Dict[str, Any]:
        """
        Validate and persist one new document.

        Args:
            resource: Which collection/table and schema to use
            fields:   Document fields; a caller-supplied `_id` is ignored

        Returns:
            The stored record: `{"_id": <generated>, **document}`

        Raises:
            DocumentValidationError: the document failed its schema
            StorageError: the database could not complete the write
        """
        document = {key: value for key, value in fields.items() if key != "_id"}

        result = validate_document(resource.schema, resource.model_name, document)
        if not result.ok:
            raise DocumentValidationError(
                message=result.message,
                resource=resource.name,
                field_errors=result.errors,
            )

        record = resource.table(document=result.document)
        try:
            async with self.session() as session:
                session.add(record)
                await session.flush()
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as exc:
            logger.error(
                "Write to %s failed: %s",
                resource.table.__tablename__,
                str(exc),
                exc_info=True,
            )
            raise StorageError(
                message=f"{resource.model_name} could not be saved: {type(exc).__name__}",
                resource=resource.name,
                context={"original_error": type(exc).__name__},
            ) from exc

        return record.to_response()

    async def ping(self) -> bool:
        """Cheap connectivity probe (SELECT 1). Never raises."""
        if self._engine is None:
            return False
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as exc:
            logger.warning("Document store ping failed: %s", str(exc))
            return False
        return True
