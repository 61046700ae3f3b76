"""
Catalog API — Document Schemas
===============================

What:  Pydantic models describing the document stored for each resource,
       plus the small response models shared by the routes.
How:   The document store validates every incoming document against its
       resource schema before writing it. JSON keys are camelCase; the
       Python attributes are snake_case via an alias generator.

Schema Inventory:
    - book.py:    BookDocument (open field set, unknown keys kept)
    - job.py:     JobDocument (open field set, unknown keys kept)
    - product.py: ProductDocument (fixed field set)
    - common.py:  DocumentSchema base, HealthResponse, error bodies
"""
