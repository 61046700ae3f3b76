"""
Catalog API — ORM Models
=========================

Importing this package registers every record table on Base.metadata,
which the document store (create_all) and Alembic both rely on.
"""

from catalog_api.models.records import BookRecord, JobRecord, ProductRecord

__all__ = ["BookRecord", "JobRecord", "ProductRecord"]
