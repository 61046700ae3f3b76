"""
Catalog API — Job Document Schema
==================================

What:  Shape of a stored job posting. Unknown keys are kept verbatim.
"""

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog_api.schemas.common import DocumentSchema, EmbeddedSchema


class Company(EmbeddedSchema):
    name: str = Field(min_length=1)
    contact_email: str = Field(min_length=1)
    contact_phone: str = Field(min_length=1)


class JobDocument(DocumentSchema):
    """A job posting: what the role is and who is hiring."""

    model_config = ConfigDict(alias_generator=to_camel, extra="allow")

    title: str = Field(min_length=1)
    type: str = Field(min_length=1)
    description: str = Field(min_length=1)
    company: Company
