"""
Catalog API — Product Document Schema
======================================

What:  Shape of a stored product.
How:   Fixed field set. The create handler projects the request body onto
       PRODUCT_FIELDS before the store sees it; the schema itself also
       ignores unknown keys.
"""

from typing import Optional

from pydantic import Field

from catalog_api.schemas.common import DocumentSchema, EmbeddedSchema

# Body keys the product create handler keeps
PRODUCT_FIELDS = (
    "title",
    "category",
    "description",
    "price",
    "stockQuantity",
    "supplier",
)


class Supplier(EmbeddedSchema):
    name: str = Field(min_length=1)
    contact_email: str = Field(min_length=1)
    contact_phone: str = Field(min_length=1)
    rating: Optional[float] = Field(default=None, ge=1, le=5)


class ProductDocument(DocumentSchema):
    """
    A product for sale.

    Example:
        {"title": "Pen", "category": "Stationery", "description": "Blue ink",
         "price": 1.5, "stockQuantity": 200,
         "supplier": {"name": "Acme", "contactEmail": "sales@acme.test",
                      "contactPhone": "555-0100", "rating": 4.5}}
    """

    title: str = Field(min_length=1)
    category: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: float = Field(ge=0)
    stock_quantity: int = Field(ge=0)
    supplier: Supplier
