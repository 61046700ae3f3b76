"""
Catalog API — Resource Registry
================================

What:  Static description of each resource the service exposes.
How:   A ResourceDefinition bundles everything that differs between books,
       jobs and products: route prefix, schema, table, which body fields
       the create handler keeps, and the shape of its 400 body. Handlers
       and routers are generic over it.

Resource Inventory:
    books     /books          open body         {"message", "error"} on failure
    jobs      /jobs           open body         {"message", "error"} on failure
    products  /api/products   six named fields  {"error"} on failure
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Type

from catalog_api.models.records import BookRecord, JobRecord, ProductRecord, RecordMixin
from catalog_api.schemas.book import BookDocument
from catalog_api.schemas.common import DocumentSchema
from catalog_api.schemas.job import JobDocument
from catalog_api.schemas.product import PRODUCT_FIELDS, ProductDocument


@dataclass(frozen=True)
class ResourceDefinition:
    """
    Attributes:
        name:            Singular lowercase name ("book")
        plural:          Plural lowercase name ("books")
        prefix:          Mount point of the resource router
        schema:          Document schema the store validates against
        table:           ORM model the store writes to
        fields:          Body keys kept by create; None keeps the whole body
        failure_message: `message` value of the 400 body; None omits the key
    """
    name: str
    plural: str
    prefix: str
    schema: Type[DocumentSchema]
    table: Type[RecordMixin]
    fields: Optional[Tuple[str, ...]] = None
    failure_message: Optional[str] = None

    @property
    def model_name(self) -> str:
        return self.name.capitalize()

    @property
    def tag(self) -> str:
        return self.plural.capitalize()

    # Placeholder route bodies, e.g. getAllBooks / getBookById
    @property
    def list_label(self) -> str:
        return f"getAll{self.plural.capitalize()}"

    @property
    def get_label(self) -> str:
        return f"get{self.model_name}ById"

    @property
    def update_label(self) -> str:
        return f"update{self.model_name}"

    @property
    def delete_label(self) -> str:
        return f"delete{self.model_name}"


BOOKS = ResourceDefinition(
    name="book",
    plural="books",
    prefix="/books",
    schema=BookDocument,
    table=BookRecord,
    failure_message="Failed to create book",
)

JOBS = ResourceDefinition(
    name="job",
    plural="jobs",
    prefix="/jobs",
    schema=JobDocument,
    table=JobRecord,
    failure_message="Failed to create job",
)

PRODUCTS = ResourceDefinition(
    name="product",
    plural="products",
    prefix="/api/products",
    schema=ProductDocument,
    table=ProductRecord,
    fields=PRODUCT_FIELDS,
)

RESOURCES: Tuple[ResourceDefinition, ...] = (BOOKS, JOBS, PRODUCTS)
