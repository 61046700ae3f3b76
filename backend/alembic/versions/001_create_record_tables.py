"""Create record tables

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

What:  Creates `books`, `jobs` and `products`, one row per created record.
How:   Same three columns for every table; the document body is JSONB.
       See catalog_api/models/records.py for the ORM side.

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

RECORD_TABLES = ("books", "jobs", "products")


def upgrade() -> None:
    for table_name in RECORD_TABLES:
        op.create_table(
            table_name,
            sa.Column(
                "id",
                sa.String(36),
                nullable=False,
                comment="Server-generated record identifier",
            ),
            sa.Column(
                "document",
                postgresql.JSONB(),
                nullable=False,
                comment="Validated document body",
            ),
            sa.Column(
                "created_at",
                sa.TIMESTAMP(timezone=True),
                server_default=sa.text("CURRENT_TIMESTAMP"),
                nullable=False,
                comment="When this record was created (UTC)",
            ),
            sa.PrimaryKeyConstraint("id"),
        )


def downgrade() -> None:
    for table_name in reversed(RECORD_TABLES):
        op.drop_table(table_name)
