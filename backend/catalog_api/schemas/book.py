"""
Catalog API — Book Document Schema
===================================

What:  Shape of a stored book.
How:   `title` and `author` are required; the availability block gets a
       default when omitted. Any key the schema does not name is kept
       verbatim, so a create request's body always round-trips.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog_api.schemas.common import DocumentSchema, EmbeddedSchema


class Availability(EmbeddedSchema):
    is_available: bool = True
    due_date: Optional[datetime] = None
    borrower: str = ""


class BookDocument(DocumentSchema):
    """
    A book in the catalog.

    Example:
        {"title": "Dune", "author": "Herbert", "isbn": "978-0441013593",
         "availability": {"isAvailable": true, "dueDate": null, "borrower": ""}}
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="allow")

    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    isbn: Optional[str] = None
    publisher: Optional[str] = None
    genre: Optional[str] = None
    availability: Availability = Field(default_factory=Availability)
