"""
Catalog API — Shared Schema Pieces
===================================

What:  The DocumentSchema base every resource document inherits, and the
       response models used in route metadata and the health check.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DocumentSchema(BaseModel):
    """
    Base for stored documents.

    Keys arrive and leave in camelCase (`stockQuantity`, `contactEmail`).
    Subclasses choose `extra="allow"` (open documents) or `extra="ignore"`.
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="ignore", allow_inf_nan=False)

    def to_document(self) -> Dict[str, Any]:
        """
        JSON-safe dict with camelCase keys, ready for the JSON column.

        Optional fields the caller never sent are left out rather than
        stored as null; defaults that carry a value (availability) stay.
        """
        document = self.model_dump(mode="json", by_alias=True)
        fields = type(self).model_fields
        for name in fields.keys() - self.model_fields_set:
            if getattr(self, name) is None:
                document.pop(fields[name].alias or name, None)
        return document


class EmbeddedSchema(DocumentSchema):
    """Nested sub-document (supplier, company, availability). Unknown keys dropped."""


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class CreateFailedResponse(BaseModel):
    """
    400 body for books and jobs.

    Example:
        {"message": "Failed to create book", "error": "Book validation failed: ..."}
    """
    message: str = Field(description="Fixed per-resource failure message")
    error: str = Field(description="Underlying persistence failure reason")


class ErrorOnlyResponse(BaseModel):
    """400 body for products: the failure reason and nothing else."""
    error: str = Field(description="Underlying persistence failure reason")


class ErrorResponse(BaseModel):
    """Body for errors raised outside the create handlers (malformed JSON, 500s)."""
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable description")
    request_id: str = Field(default="", description="Correlation ID from X-Request-ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
