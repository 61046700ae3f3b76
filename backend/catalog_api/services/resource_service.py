"""
Catalog API — Resource Handlers
================================

What:  The per-resource request handlers behind the five CRUD routes.
How:   ResourceCreateHandler turns a request body into one store write and
       an HTTP outcome. PlaceholderHandler stands in for list/get/update/
       delete, which have no behaviour yet and answer with a fixed label.
Who:   Built once per resource by the application factory (with the
       DocumentStore injected) and called by the routes in routes/resources.py.

Create flow:
    body ──▶ select_fields() ──▶ store.create() ──▶ 201 + record
                                      │ PersistenceError
                                      ▼
                                400 + failure_body()

Concurrency:
    Handlers hold no per-request state. Two identical bodies posted at the
    same time become two records with different ids.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from catalog_api.database import DocumentStore
from catalog_api.exceptions import PersistenceError
from catalog_api.resources import ResourceDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateOutcome:
    """Status code and JSON body for one create call."""
    status_code: int
    body: Dict[str, Any]

    @property
    def created(self) -> bool:
        return self.status_code == 201


class ResourceCreateHandler:
    """
    Create operation for one resource.

    Args:
        resource: Definition (schema, table, field projection, error shape)
        store:    Connected DocumentStore; the only collaborator
    """

    def __init__(self, resource: ResourceDefinition, store: DocumentStore):
        self.resource = resource
        self.store = store

    def select_fields(self, body: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Fields forwarded to the store.

        Open resources forward the body as-is. Fixed resources keep only
        their named fields; absent ones stay absent, everything else is
        dropped without comment.
        """
        if self.resource.fields is None:
            return dict(body)
        return {key: body[key] for key in self.resource.fields if key in body}

    def failure_body(self, exc: PersistenceError) -> Dict[str, Any]:
        if self.resource.failure_message is None:
            return {"error": exc.message}
        return {"message": self.resource.failure_message, "error": exc.message}

    async def create(self, body: Optional[Mapping[str, Any]]) -> CreateOutcome:
        """
        Persist one record from `body`.

        Returns:
            CreateOutcome(201, record) on success, CreateOutcome(400, error
            body) when the store raises PersistenceError. Nothing else is
            caught: unexpected errors reach the global 500 handler.
        """
        fields = self.select_fields(body or {})
        try:
            record = await self.store.create(self.resource, fields)
        except PersistenceError as exc:
            logger.warning(
                "Failed to create %s: %s | Context: %s",
                self.resource.name,
                exc.message,
                exc.context,
            )
            return CreateOutcome(status_code=400, body=self.failure_body(exc))

        logger.info("Created %s %s", self.resource.name, record["_id"])
        return CreateOutcome(status_code=201, body=record)


class PlaceholderHandler:
    """
    Route that exists but does nothing yet.

    Always answers 200 with its label (e.g. "getBookById"), whatever the
    request carries. Performs no data access.
    """

    def __init__(self, label: str):
        self.label = label

    def respond(self) -> str:
        logger.debug("Placeholder route hit: %s", self.label)
        return self.label

    def __repr__(self) -> str:
        return f"PlaceholderHandler({self.label!r})"
