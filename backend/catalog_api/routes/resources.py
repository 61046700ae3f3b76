"""
Catalog API — Resource Route Handlers
======================================

What:  The five routes every resource exposes.
How:   build_resource_router() mounts one APIRouter per ResourceDefinition
       and closes over the handlers built for it, so the store reaches the
       routes by construction rather than through module state.

Route Inventory (per resource, e.g. prefix=/books):
    GET    /books          → placeholder "getAllBooks"
    POST   /books          → ResourceCreateHandler (201 | 400)
    GET    /books/{id}     → placeholder "getBookById"
    PUT    /books/{id}     → placeholder "updateBook"
    DELETE /books/{id}     → placeholder "deleteBook"

    The bare prefix and the trailing-slash form are both served.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse, PlainTextResponse

from catalog_api.resources import ResourceDefinition
from catalog_api.schemas.common import CreateFailedResponse, ErrorOnlyResponse
from catalog_api.services.resource_service import PlaceholderHandler, ResourceCreateHandler

logger = logging.getLogger(__name__)


def build_resource_router(
    resource: ResourceDefinition,
    create_handler: ResourceCreateHandler,
) -> APIRouter:
    """
    Assemble the router for one resource.

    Args:
        resource:       Definition supplying prefix, tag and placeholder labels
        create_handler: Handler wired to the application's DocumentStore
    """
    router = APIRouter(prefix=resource.prefix, tags=[resource.tag])

    list_handler = PlaceholderHandler(resource.list_label)
    get_handler = PlaceholderHandler(resource.get_label)
    update_handler = PlaceholderHandler(resource.update_label)
    delete_handler = PlaceholderHandler(resource.delete_label)

    failure_model = (
        ErrorOnlyResponse if resource.failure_message is None else CreateFailedResponse
    )

    @router.get(
        "",
        response_class=PlainTextResponse,
        summary=f"List {resource.plural} (not implemented)",
    )
    @router.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def list_records() -> str:
        return list_handler.respond()

    @router.post(
        "",
        status_code=201,
        responses={
            201: {"description": f"The created {resource.name}, including its `_id`"},
            400: {"description": "The store rejected the document", "model": failure_model},
        },
        summary=f"Create a {resource.name}",
    )
    @router.post("/", status_code=201, include_in_schema=False)
    async def create_record(
        body: Optional[Dict[str, Any]] = Body(
            default=None,
            description=f"{resource.model_name} document (JSON object)",
        ),
    ) -> JSONResponse:
        outcome = await create_handler.create(body)
        return JSONResponse(status_code=outcome.status_code, content=outcome.body)

    @router.get(
        "/{record_id}",
        response_class=PlainTextResponse,
        summary=f"Get a {resource.name} (not implemented)",
    )
    async def get_record(record_id: str) -> str:
        return get_handler.respond()

    @router.put(
        "/{record_id}",
        response_class=PlainTextResponse,
        summary=f"Update a {resource.name} (not implemented)",
    )
    async def update_record(record_id: str) -> str:
        return update_handler.respond()

    @router.delete(
        "/{record_id}",
        response_class=PlainTextResponse,
        summary=f"Delete a {resource.name} (not implemented)",
    )
    async def delete_record(record_id: str) -> str:
        return delete_handler.respond()

    logger.debug("Mounted %s routes at %s", resource.plural, resource.prefix)
    return router
