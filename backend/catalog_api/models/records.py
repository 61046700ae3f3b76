"""
Catalog API — Record Tables
============================

What:  ORM models for the `books`, `jobs` and `products` tables.
How:   Every resource stores its validated document in one JSON column
       (JSONB on Postgres) next to a server-generated string id and a
       creation timestamp. The document shape is owned by the Pydantic
       schemas, not by the table.
Who:   Written by DocumentStore.create(); read by Alembic for migrations.

Table layout (identical for all three):
    id          VARCHAR(36)  PK, uuid4 string, returned to clients as `_id`
    document    JSON/JSONB   validated document, camelCase keys
    created_at  TIMESTAMPTZ  UTC insert time (not part of the response)
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import JSON, String, text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base

DocumentType = JSON().with_variant(JSONB(), "postgresql")


def _new_record_id() -> str:
    return str(uuid.uuid4())


class RecordMixin:
    """Columns and serialization shared by every resource table."""

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=_new_record_id,
        comment="Server-generated record identifier",
    )

    document: Mapped[Dict[str, Any]] = mapped_column(
        DocumentType,
        nullable=False,
        comment="Validated document body",
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this record was created (UTC)",
    )

    def to_response(self) -> Dict[str, Any]:
        """Record as returned to API clients: `_id` first, then the document."""
        return {"_id": self.id, **self.document}

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"


class BookRecord(RecordMixin, Base):
    __tablename__ = "books"


class JobRecord(RecordMixin, Base):
    __tablename__ = "jobs"


class ProductRecord(RecordMixin, Base):
    __tablename__ = "products"
